# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Single-object front end for spring-graph layouts

import numpy as np

from .sim import Model, SpringConfig
from .solvers import SolverSpringLayout


class SpringSystem:
    """
    A force-directed layout of one graph: Model + State + Solver.

    The caller owns the driving loop. Its only contract with the system is
    ``update()`` followed by reading positions; nothing else mutates the
    buffers.

    Args:
        nodes: Node records ``{"id": ...}``, ids must be unique and hashable
        edges: Edge records ``{"source": ..., "target": ..., "id": ...}``
        width: Viewport width for the initial placement
        height: Viewport height for the initial placement
        config: SpringConfig, or None for the defaults
            (stiffness=10, damping=0.03, rest_length=150)
        positions: Optional (N, 2) initial positions
        seed: Seed or numpy Generator for the random placement
        device: Warp device ('cpu' or 'cuda')
        verbose: Print a summary line

    Raises:
        TopologyError: An edge references an unknown node id, or ids repeat

    Example:
        >>> system = SpringSystem(nodes, edges, width=800, height=600)
        >>> system.update()
        >>> xy = system.positions()
    """

    def __init__(self, nodes, edges, width: float, height: float, config: SpringConfig = None,
                 positions=None, seed=None, device='cpu', verbose: bool = False):
        self.model = Model.from_graph(nodes, edges, width, height, config=config,
                                      positions=positions, seed=seed, device=device,
                                      verbose=verbose)
        self._init_from_model(self.model)

    @classmethod
    def from_model(cls, model: Model):
        """Wrap an already built Model (e.g. ScaleFreeModel)."""
        system = cls.__new__(cls)
        system.model = model
        system._init_from_model(model)
        return system

    def _init_from_model(self, model):
        self.state = model.state()
        self.solver = SolverSpringLayout(model)
        self._edge_indices = model.topology.spring_pairs

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self):
        """Advance one fixed step: spring pass, then node pass."""
        self.solver.step(self.state)

    @property
    def tick_count(self) -> int:
        return self.solver.step_count

    # ------------------------------------------------------------------
    # Read-out
    # ------------------------------------------------------------------

    @property
    def node_count(self) -> int:
        return self.model.node_count

    @property
    def edge_count(self) -> int:
        return self.model.spring_count

    @property
    def node_index(self):
        """Read-only map node id -> dense index."""
        return self.model.topology.node_index

    @property
    def edge_index(self):
        """Read-only map edge key -> dense index."""
        return self.model.topology.edge_index

    def positions(self) -> np.ndarray:
        """Copy of the current positions, shape (N, 2)."""
        return _snapshot(self.state.node_q.numpy(), 2)

    def x_positions(self) -> np.ndarray:
        return self.positions()[:, 0]

    def y_positions(self) -> np.ndarray:
        return self.positions()[:, 1]

    def velocities(self) -> np.ndarray:
        """Copy of the current velocities, shape (N, 2)."""
        return _snapshot(self.state.node_qd.numpy(), 2)

    def initial_positions(self) -> np.ndarray:
        """Placement recorded in the scratch buffer at construction."""
        return _snapshot(self.state.node_scratch.numpy(), 2)

    def edge_indices(self) -> np.ndarray:
        """Spring endpoints (source, target), shape (E, 2), read-only."""
        return self._edge_indices


def _snapshot(array: np.ndarray, width: int) -> np.ndarray:
    # .numpy() on the cpu device aliases the warp buffer
    return np.array(array, dtype=array.dtype, copy=True).reshape(-1, width)
