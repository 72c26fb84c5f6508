# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Scale-free random graph model

import numpy as np

from ..sim.model import Model


def scale_free_network(count: int, seed=None) -> dict:
    """
    Generate a random scale-free graph by degree-proportional attachment.

    Node 1 is always connected to node 0. Every later node ``i`` connects to
    exactly one earlier node drawn with probability proportional to its
    current degree, so the result is a tree with ``count - 1`` edges.

    Args:
        count: Number of nodes
        seed: Seed or numpy Generator

    Returns:
        dict: ``{"nodes": [{"id": i}, ...], "edges": [{"source": i, "target": j}, ...]}``
    """
    if count < 0:
        raise ValueError(f"Node count must be >= 0 (got {count})")

    rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

    nodes = []
    edges = []
    degree = np.zeros(count, dtype=np.int64)

    for i in range(count):
        nodes.append({"id": i})

        if i == 0:
            continue
        if i == 1:
            target = 0
        else:
            # Every earlier node has degree >= 1, total is 2 * len(edges)
            cumulative = np.cumsum(degree[:i])
            r = rng.integers(cumulative[-1])
            target = int(np.searchsorted(cumulative, r, side='right'))

        edges.append({"source": i, "target": target})
        degree[i] += 1
        degree[target] += 1

    return {"nodes": nodes, "edges": edges}


class ScaleFreeModel(Model):
    """
    Layout model for a generated scale-free graph.

    Args:
        count: Number of nodes. Default 20.
        width: Viewport width for the initial placement
        height: Viewport height for the initial placement
        config: SpringConfig (defaults apply when None)
        seed: Seed or numpy Generator used for both topology and placement
        device: Warp device ('cpu' or 'cuda')
        verbose: Print a summary line

    Example:
        >>> model = ScaleFreeModel(count=50, width=1000, height=700, seed=1)
        >>> state = model.state()
    """

    def __init__(self, count: int = 20, width: float = 1000.0, height: float = 700.0,
                 config=None, seed=None, device='cpu', verbose: bool = True):
        super().__init__(device=device)
        rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)

        network = scale_free_network(count, seed=rng)
        self._build_graph(network["nodes"], network["edges"], width, height,
                          config=config, seed=rng, verbose=False)

        if verbose:
            degrees = np.bincount(self.topology.spring_pairs.flatten(), minlength=count)
            max_degree = int(degrees.max()) if count > 0 else 0
            print(f"✓ Created scale-free graph: {count} nodes, {self.spring_count} edges, max degree {max_degree}")
