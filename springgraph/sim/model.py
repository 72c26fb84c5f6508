# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# 2D Model class for force-directed graph layouts

from typing import Any, Iterable, Mapping, Optional

import numpy as np
import warp as wp

from .config import SpringConfig
from .state import State
from .topology import build_topology, enumerate_pairs


class Model:
    """
    Represents the static definition of a graph laid out by springs.

    Stores topology, spring parameters and the initial placement. Node
    and edge counts are fixed for the lifetime of the model.

    Key Features:
        - Dense node/edge indices built once from external ids
        - Per-spring stiffness, damping and rest length (global defaults)
        - Optional all-pairs index list for the repulsion term
    """

    def __init__(self, device='cpu'):
        """
        Initialize an empty Model.

        Args:
            device (str): Device on which the Model's data will be allocated ('cpu' or 'cuda')
        """
        self.device = wp.get_device(device)
        self.config = SpringConfig()

        # Topology
        self.topology = None                # Topology index (id -> dense slot maps)

        # Node properties
        self.node_q = None                  # Initial positions, shape [node_count], vec2
        self.node_qd = None                 # Initial velocities, shape [node_count], vec2
        self.node_count = 0

        # Spring network properties
        self.spring_indices = None          # Spring connectivity [i0, j0, i1, j1, ...], shape [spring_count*2], int
        self.spring_rest_length = None      # Rest length per spring, shape [spring_count], float
        self.spring_stiffness = None        # Stiffness per spring, shape [spring_count], float
        self.spring_damping = None          # Damping per spring, shape [spring_count], float
        self.spring_count = 0

        # Pairwise term (allocated only when config.with_pairs)
        self.pair_indices = None            # Pair connectivity [i0, j0, i1, j1, ...], shape [pair_count*2], int
        self.pair_count = 0

        # Viewport used for the initial placement
        self.width = 0.0
        self.height = 0.0

    def state(self) -> State:
        """
        Create and return a new State object for this model.

        The returned state starts from the model's initial placement with
        the scratch buffer holding a copy of it.

        Returns:
            State: The state object
        """
        s = State()
        s.node_q = wp.clone(self.node_q)
        s.node_qd = wp.clone(self.node_qd)
        s.node_scratch = wp.clone(self.node_q)
        s.node_dv = wp.zeros(self.node_count, dtype=wp.vec2, device=self.device)
        return s

    @classmethod
    def from_graph(cls, nodes: Iterable[Mapping[str, Any]], edges: Iterable[Mapping[str, Any]],
                   width: float, height: float, config: Optional[SpringConfig] = None,
                   positions=None, seed=None, device='cpu', verbose: bool = False):
        """
        Create a layout model from node and edge records.

        Args:
            nodes: Node records ``{"id": ...}``
            edges: Edge records ``{"source": ..., "target": ..., "id": ...}``.
                ``stiffness``, ``damping`` and ``rest_length`` keys override
                the config values for that edge.
            width: Viewport width, initial x is drawn from [0, width)
            height: Viewport height, initial y is drawn from [0, height)
            config: Spring parameters (defaults to SpringConfig())
            positions: Optional (N, 2) initial positions instead of random placement
            seed: Seed or numpy Generator for the random placement
            device: Warp device ('cpu' or 'cuda')
            verbose: Print a summary line

        Returns:
            Model: The initialized model

        Raises:
            TopologyError: Invalid node/edge records
            ValueError: Invalid viewport, positions or config
        """
        model = cls(device=device)
        model._build_graph(nodes, edges, width, height, config=config,
                           positions=positions, seed=seed, verbose=verbose)
        return model

    def _build_graph(self, nodes, edges, width, height, config=None,
                     positions=None, seed=None, verbose=False):
        """Validate the records and allocate every model buffer."""
        config = (config or SpringConfig()).validate()
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must have positive size (got {width}x{height})")

        nodes = list(nodes)
        edges = list(edges)
        topology = build_topology(nodes, edges)

        device = self.device
        self.config = config
        self.topology = topology
        self.width = float(width)
        self.height = float(height)

        n_nodes = topology.node_count
        self.node_count = n_nodes

        if positions is None:
            pos_np = _random_placement(n_nodes, width, height, seed)
        else:
            pos_np = np.array(positions, dtype=np.float32)
            if pos_np.size == 0:
                pos_np = pos_np.reshape(-1, 2)
            if pos_np.shape != (n_nodes, 2):
                raise ValueError(f"positions must have shape ({n_nodes}, 2), got {pos_np.shape}")
        vel_np = np.zeros((n_nodes, 2), dtype=np.float32)

        self.node_q = wp.array(pos_np, dtype=wp.vec2, device=device)
        self.node_qd = wp.array(vel_np, dtype=wp.vec2, device=device)

        self._setup_springs(edges, topology, config, device)

        if config.with_pairs:
            self._setup_pairs(n_nodes, device)

        if verbose:
            print(f"✓ Created layout model: {n_nodes} nodes, {self.spring_count} springs", end="")
            if config.with_pairs:
                print(f", {self.pair_count} pairs")
            else:
                print()

    def _setup_springs(self, edges, topology, config, device):
        """Create spring arrays from resolved endpoints and per-edge overrides."""
        n_springs = topology.edge_count

        stiffnesses = np.full(n_springs, config.stiffness, dtype=np.float32)
        dampings = np.full(n_springs, config.damping, dtype=np.float32)
        rest_lengths = np.full(n_springs, config.rest_length, dtype=np.float32)
        for i, edge in enumerate(edges):
            if edge.get("stiffness") is not None:
                stiffnesses[i] = edge["stiffness"]
            if edge.get("damping") is not None:
                dampings[i] = edge["damping"]
            if edge.get("rest_length") is not None:
                rest_lengths[i] = edge["rest_length"]

        self.spring_count = n_springs
        self.spring_indices = wp.array(topology.spring_pairs.flatten(), dtype=int, device=device)
        self.spring_stiffness = wp.array(stiffnesses, dtype=float, device=device)
        self.spring_damping = wp.array(dampings, dtype=float, device=device)
        self.spring_rest_length = wp.array(rest_lengths, dtype=float, device=device)

    def _setup_pairs(self, n_nodes, device):
        """Allocate the all-pairs index list, n*(n-1)/2 entries."""
        pairs = enumerate_pairs(n_nodes)
        self.pair_count = len(pairs)
        self.pair_indices = wp.array(pairs.flatten(), dtype=int, device=device)


def _random_placement(n, width, height, seed):
    """Uniform positions in [0, width) x [0, height), float32."""
    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
    pos = rng.random((n, 2)) * np.array([width, height])
    pos = pos.astype(np.float32)
    # float32 rounding can land exactly on the upper bound
    upper = np.array([np.nextafter(np.float32(width), np.float32(0)),
                      np.nextafter(np.float32(height), np.float32(0))], dtype=np.float32)
    return np.minimum(pos, upper)
