# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Dense index assignment for graph nodes and edges

from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping

import numpy as np


class TopologyError(ValueError):
    """Raised when node/edge records do not describe a valid graph."""


class Topology:
    """
    Write-once mapping from external node/edge ids to dense slots.

    Attributes:
        node_index: Read-only map node id -> dense node index
        edge_index: Read-only map edge key -> dense edge index. Edges without
            an ``id`` are keyed by their position in the input sequence.
        spring_pairs: int32 array of shape (E, 2) with (source, target) indices
    """

    def __init__(self, node_index, edge_index, spring_pairs):
        self.node_index = MappingProxyType(node_index)
        self.edge_index = MappingProxyType(edge_index)
        self.spring_pairs = spring_pairs
        self.spring_pairs.setflags(write=False)

    @property
    def node_count(self) -> int:
        return len(self.node_index)

    @property
    def edge_count(self) -> int:
        return len(self.spring_pairs)


def build_topology(nodes: Iterable[Mapping[str, Any]],
                   edges: Iterable[Mapping[str, Any]]) -> Topology:
    """
    Assign dense indices to nodes (input order) and resolve edge endpoints.

    Args:
        nodes: Node records, each with an ``id`` key (any hashable value)
        edges: Edge records with ``source`` and ``target`` node ids and an
            optional ``id``

    Returns:
        Topology: The frozen index maps and endpoint pairs

    Raises:
        TopologyError: Duplicate node id, duplicate edge key, or an edge
            referencing a node id that is not in ``nodes``
    """
    node_index = {}
    for i, node in enumerate(nodes):
        node_id = _record_id(node, "id", f"node {i}")
        if node_id in node_index:
            raise TopologyError(f"Duplicate node id: {node_id!r}")
        node_index[node_id] = i

    edge_index = {}
    pairs = []
    for i, edge in enumerate(edges):
        source = _record_id(edge, "source", f"edge {i}")
        target = _record_id(edge, "target", f"edge {i}")
        if source not in node_index:
            raise TopologyError(f"Edge {i} references unknown source node {source!r}")
        if target not in node_index:
            raise TopologyError(f"Edge {i} references unknown target node {target!r}")

        key = edge.get("id")
        if key is None:
            key = i
        if key in edge_index:
            raise TopologyError(f"Duplicate edge id: {key!r}")
        edge_index[key] = i
        pairs.append((node_index[source], node_index[target]))

    spring_pairs = np.array(pairs, dtype=np.int32).reshape(-1, 2)
    return Topology(node_index, edge_index, spring_pairs)


def enumerate_pairs(n: int) -> np.ndarray:
    """
    All unordered pairs (i, j) with i < j, i ascending then j ascending.

    Returns:
        int32 array of shape (n*(n-1)/2, 2)
    """
    if n < 0:
        raise ValueError(f"Node count must be >= 0 (got {n})")
    rows, cols = np.triu_indices(n, k=1)
    return np.stack([rows, cols], axis=1).astype(np.int32).reshape(-1, 2)


def _record_id(record: Mapping[str, Any], key: str, where: str) -> Hashable:
    try:
        value = record[key]
    except (KeyError, TypeError):
        raise TopologyError(f"{where} is missing required key {key!r}") from None
    try:
        hash(value)
    except TypeError:
        raise TopologyError(f"{where} has unhashable {key}: {value!r}") from None
    return value
