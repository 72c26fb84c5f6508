# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Explicit spring-layout solver for 2D graphs

from ..solver import SolverBase
from .kernels_spring import eval_spring_forces_2d, integrate_nodes


class SolverSpringLayout(SolverBase):
    """
    Explicit Euler integrator for force-directed graph layouts.

    One step is a spring pass over every edge followed by a node pass over
    every node. The spring pass finishes completely (all velocity deltas
    applied) before any position moves. There is no global friction; the
    per-spring damping term is the only dissipation.

    Example:
        >>> model = Model.from_graph(nodes, edges, width=800, height=600)
        >>> solver = SolverSpringLayout(model)
        >>> state = model.state()
        >>>
        >>> for i in range(100):
        >>>     solver.step(state)
    """

    def step(self, state, dt: float = None):
        """
        Advance the layout by one step, in place.

        Args:
            state: The State to update
            dt: The timestep (defaults to model.config.dt)

        Returns:
            State: The same state object
        """
        model = self.model
        dt = float(model.config.dt if dt is None else dt)

        # Spring pass (velocities only)
        eval_spring_forces_2d(model, state, dt)

        # Node pass (floor + drift)
        integrate_nodes(model, state, dt)

        self.step_count += 1
        return state
