import numpy as np
import pytest

from weightedgraph.classes.utils import (
    build_weight_matrix,
    calculate_in_degree,
    find_incoming_edges,
    format_adjacency,
)


ADJACENCY = {
    "A": {"B": 2, "C": 3},
    "B": {},
    "C": {"B": 4},
}


def test_find_incoming_edges():
    assert find_incoming_edges(ADJACENCY, "B") == {"A": 2, "C": 4}
    assert find_incoming_edges(ADJACENCY, "A") == {}
    assert find_incoming_edges(ADJACENCY, "missing") == {}


def test_calculate_in_degree_includes_every_vertex():
    assert calculate_in_degree(ADJACENCY) == {"A": 0, "B": 2, "C": 1}


def test_build_weight_matrix():
    matrix = build_weight_matrix(ADJACENCY)
    np.testing.assert_array_equal(matrix, [[0, 2, 3], [0, 0, 0], [0, 4, 0]])


def test_build_weight_matrix_subset_skips_outside_targets():
    matrix = build_weight_matrix(ADJACENCY, ["C", "A"])
    np.testing.assert_array_equal(matrix, [[0, 0], [3, 0]])


def test_build_weight_matrix_unknown_label():
    with pytest.raises(KeyError):
        build_weight_matrix(ADJACENCY, ["Z"])


def test_format_adjacency():
    text = format_adjacency(ADJACENCY)
    assert text.splitlines() == ["  A -> B(2), C(3)", "  B", "  C -> B(4)"]
