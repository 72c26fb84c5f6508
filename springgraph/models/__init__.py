# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0

from .scale_free import ScaleFreeModel, scale_free_network

__all__ = [
    "ScaleFreeModel",
    "scale_free_network",
]
