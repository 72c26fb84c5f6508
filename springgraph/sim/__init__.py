# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .config import SpringConfig
from .state import State
from .model import Model
from .topology import Topology, TopologyError, build_topology, enumerate_pairs

__all__ = [
    "Model",
    "State",
    "SpringConfig",
    "Topology",
    "TopologyError",
    "build_topology",
    "enumerate_pairs",
]
