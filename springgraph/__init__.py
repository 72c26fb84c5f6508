# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Warp-accelerated force-directed graph layout

from .sim import Model, SpringConfig, State, Topology, TopologyError, build_topology, enumerate_pairs
from .solvers import SolverBase, SolverSpringLayout
from .models import ScaleFreeModel, scale_free_network
from .spring_system import SpringSystem

__version__ = "0.1.0"

__all__ = [
    "Model",
    "State",
    "SpringConfig",
    "Topology",
    "TopologyError",
    "build_topology",
    "enumerate_pairs",
    "SolverBase",
    "SolverSpringLayout",
    "ScaleFreeModel",
    "scale_free_network",
    "SpringSystem",
]
