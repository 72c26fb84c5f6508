# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# State class for 2D spring-graph layouts

class State:
    """
    Represents the time-varying state of a graph layout.

    Every buffer is allocated once by ``Model.state()`` and only ever
    written in place afterwards.

    Attributes:
        node_q: Positions (vec2), shape [node_count]
        node_qd: Velocities (vec2), shape [node_count]
        node_scratch: Reserved scratch (vec2), holds the initial placement
        node_dv: Per-tick velocity deltas (vec2), shape [node_count]
    """

    def __init__(self):
        self.node_q = None        # Positions (vec2)
        self.node_qd = None       # Velocities (vec2)
        self.node_scratch = None  # Initial placement (vec2)
        self.node_dv = None       # Velocity deltas (vec2)
