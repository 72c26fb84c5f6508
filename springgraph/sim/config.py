# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Simulation parameters for spring-graph layouts

from dataclasses import dataclass


@dataclass
class SpringConfig:
    """Physical parameters shared by every spring in a layout."""
    # Springs (global defaults, per-edge overrides allowed)
    stiffness: float = 10.0
    damping: float = 0.03
    rest_length: float = 150.0

    # Integration
    dt: float = 1.0
    velocity_floor: float = 0.0001     # |v| at or below this snaps to zero
    degenerate_distance: float = 1.0   # substituted when two endpoints coincide

    # Optional all-pairs repulsion
    with_pairs: bool = False
    repulsion: float = 0.0

    def validate(self):
        """Raise ValueError for parameters the kernels cannot use."""
        if self.rest_length < 0.0:
            raise ValueError(f"rest_length must be >= 0 (got {self.rest_length})")
        if self.dt <= 0.0:
            raise ValueError(f"dt must be positive (got {self.dt})")
        if self.velocity_floor < 0.0:
            raise ValueError(f"velocity_floor must be >= 0 (got {self.velocity_floor})")
        if self.degenerate_distance <= 0.0:
            raise ValueError(f"degenerate_distance must be positive (got {self.degenerate_distance})")
        if self.repulsion != 0.0 and not self.with_pairs:
            raise ValueError("repulsion requires with_pairs=True")
        return self
