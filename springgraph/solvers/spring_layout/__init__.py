# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .solver_spring_layout import SolverSpringLayout

__all__ = ["SolverSpringLayout"]
