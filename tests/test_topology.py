"""
Tests for the topology index and pair enumeration

Run with pytest or directly:
    python tests/test_topology.py
"""

import numpy as np
import pytest

from springgraph.sim import TopologyError, build_topology, enumerate_pairs


def test_dense_node_order():
    """Node indices follow input order, whatever the id type"""
    print("Test: dense node order... ", end="")
    nodes = [{"id": "c"}, {"id": 7}, {"id": ("x", 1)}]
    topo = build_topology(nodes, [])

    assert topo.node_index["c"] == 0
    assert topo.node_index[7] == 1
    assert topo.node_index[("x", 1)] == 2
    assert topo.node_count == 3
    assert topo.edge_count == 0
    assert topo.spring_pairs.shape == (0, 2)
    print("✓ PASSED")


def test_edge_endpoints_and_keys():
    """Edges resolve to dense pairs, missing ids fall back to the ordinal"""
    print("Test: edge endpoints... ", end="")
    nodes = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
    edges = [
        {"source": "a", "target": "c", "id": "e-ac"},
        {"source": "c", "target": "b"},
        {"source": "b", "target": "a", "id": None},
    ]
    topo = build_topology(nodes, edges)

    assert topo.spring_pairs.dtype == np.int32
    assert topo.spring_pairs.tolist() == [[0, 2], [2, 1], [1, 0]]
    assert dict(topo.edge_index) == {"e-ac": 0, 1: 1, 2: 2}

    # Every endpoint lies in [0, N)
    assert topo.spring_pairs.min() >= 0
    assert topo.spring_pairs.max() < topo.node_count
    print("✓ PASSED")


def test_maps_are_read_only():
    """Index maps and endpoint pairs cannot be mutated after construction"""
    print("Test: read-only maps... ", end="")
    topo = build_topology([{"id": 0}, {"id": 1}], [{"source": 0, "target": 1}])

    with pytest.raises(TypeError):
        topo.node_index[2] = 2
    with pytest.raises(TypeError):
        topo.edge_index["new"] = 5
    with pytest.raises(ValueError):
        topo.spring_pairs[0, 0] = 1
    print("✓ PASSED")


def test_unknown_node_fails():
    """An edge naming a node that does not exist is a configuration error"""
    print("Test: unknown node id... ", end="")
    nodes = [{"id": 0}, {"id": 1}]

    with pytest.raises(TopologyError, match="unknown target"):
        build_topology(nodes, [{"source": 0, "target": 5}])
    with pytest.raises(TopologyError, match="unknown source"):
        build_topology(nodes, [{"source": "zero", "target": 1}])
    # Still a ValueError for callers that do not know the subclass
    with pytest.raises(ValueError):
        build_topology(nodes, [{"source": 0, "target": 2}])
    print("✓ PASSED")


def test_duplicate_ids_fail():
    """Node ids and edge keys must be unique"""
    print("Test: duplicate ids... ", end="")
    with pytest.raises(TopologyError, match="Duplicate node id"):
        build_topology([{"id": 1}, {"id": 1}], [])

    nodes = [{"id": 0}, {"id": 1}]
    with pytest.raises(TopologyError, match="Duplicate edge id"):
        build_topology(nodes, [
            {"source": 0, "target": 1, "id": "e"},
            {"source": 1, "target": 0, "id": "e"},
        ])
    # Explicit key colliding with another edge's ordinal
    with pytest.raises(TopologyError, match="Duplicate edge id"):
        build_topology(nodes, [
            {"source": 0, "target": 1, "id": 1},
            {"source": 1, "target": 0},
        ])
    print("✓ PASSED")


def test_malformed_records_fail():
    """Records missing required keys are rejected"""
    print("Test: malformed records... ", end="")
    with pytest.raises(TopologyError, match="missing required key 'id'"):
        build_topology([{"name": "a"}], [])
    with pytest.raises(TopologyError, match="missing required key 'target'"):
        build_topology([{"id": 0}], [{"source": 0}])
    with pytest.raises(TopologyError, match="unhashable"):
        build_topology([{"id": [1, 2]}], [])
    print("✓ PASSED")


def test_enumerate_pairs_order():
    """Pairs are (i, j), i ascending, j from i+1 ascending"""
    print("Test: pair enumeration... ", end="")
    pairs = enumerate_pairs(4)

    assert pairs.dtype == np.int32
    assert pairs.tolist() == [[0, 1], [0, 2], [0, 3], [1, 2], [1, 3], [2, 3]]
    print("✓ PASSED")


@pytest.mark.parametrize("n", [0, 1, 2, 5, 31])
def test_enumerate_pairs_count(n):
    """Pair count is the binomial coefficient n*(n-1)/2"""
    pairs = enumerate_pairs(n)
    assert pairs.shape == (n * (n - 1) // 2, 2)
    if n > 1:
        assert np.all(pairs[:, 0] < pairs[:, 1])


def test_enumerate_pairs_negative():
    with pytest.raises(ValueError):
        enumerate_pairs(-1)


def main():
    """Run all tests"""
    print("=" * 60)
    print("Running Topology Tests")
    print("=" * 60)

    test_dense_node_order()
    test_edge_endpoints_and_keys()
    test_maps_are_read_only()
    test_unknown_node_fails()
    test_duplicate_ids_fail()
    test_malformed_records_fail()
    test_enumerate_pairs_order()
    for n in [0, 1, 2, 5, 31]:
        test_enumerate_pairs_count(n)
    test_enumerate_pairs_negative()

    print("=" * 60)
    print("✓ All tests passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
