# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Solvers module for 2D graph layouts

from .solver import SolverBase
from .spring_layout import SolverSpringLayout

__all__ = [
    "SolverBase",
    "SolverSpringLayout",
]
