"""
Tests for edge models.
"""

from fractions import Fraction

import pytest

from arbor.core.models import Edge, Node


@pytest.fixture
def nodes():
    """Fixture providing two unconnected nodes."""
    return Node(label="a"), Node(label="b")


def test_edge_creation(nodes):
    """Test basic edge creation and properties."""
    a, b = nodes
    edge = Edge(weight=5, from_node=a, to_node=b)

    assert edge.from_label == "a"
    assert edge.to_label == "b"
    assert edge.weight == 5
    assert not edge.paired
    assert edge.partner is None
    assert edge.is_numeric


def test_edge_requires_nodes(nodes):
    """Test that edge endpoints must be nodes."""
    a, _ = nodes
    with pytest.raises(TypeError, match="edge endpoints must be Node instances"):
        Edge(weight=1, from_node=a, to_node="b")


def test_edge_equality(nodes):
    """Test that equality is defined by weight and endpoint labels."""
    a, b = nodes
    edge = Edge(weight=5, from_node=a, to_node=b, paired=True)

    assert edge == Edge(weight=5, from_node=Node(label="a"), to_node=Node(label="b"))
    assert edge != Edge(weight=6, from_node=a, to_node=b)
    assert edge != Edge(weight=5, from_node=b, to_node=a)
    assert hash(edge) == hash(Edge(weight=5, from_node=a, to_node=b))


def test_edge_with_unhashable_weight(nodes):
    """Test that edges with unhashable weights can still be hashed."""
    a, b = nodes
    edge = Edge(weight=["heavy"], from_node=a, to_node=b)

    assert edge in {edge}
    assert not edge.is_numeric


def test_edge_repr(nodes):
    """Test the edge representation shows labels, not nested nodes."""
    a, b = nodes
    assert repr(Edge(weight=2, from_node=a, to_node=b)) == "Edge('a' -> 'b', weight=2, paired=False)"


def test_is_reverse_of_uses_value_equality(nodes):
    """Test reverse detection compares weights by value."""
    a, b = nodes
    forward = Edge(weight=Fraction(6, 2), from_node=a, to_node=b)
    backward = Edge(weight=Fraction(3), from_node=b, to_node=a)

    assert backward.is_reverse_of(forward)
    assert forward.is_reverse_of(backward)
    assert not Edge(weight=4, from_node=b, to_node=a).is_reverse_of(forward)
    assert not Edge(weight=3, from_node=a, to_node=b).is_reverse_of(forward)


def test_link_and_unlink(nodes):
    """Test pairing two edges and dissolving the pair."""
    a, b = nodes
    forward = Edge(weight=1, from_node=a, to_node=b)
    backward = Edge(weight=1, from_node=b, to_node=a)

    forward.link(backward)
    assert forward.paired and backward.paired
    assert forward.partner is backward
    assert backward.partner is forward

    assert backward.unlink() is forward
    assert not forward.paired and not backward.paired
    assert forward.partner is None and backward.partner is None


@pytest.mark.parametrize(
    "weight, expected",
    [
        (3, True),
        (2.5, True),
        (Fraction(1, 3), True),
        (True, False),
        ("3", False),
        (None, False),
        (float("nan"), False),
        (float("inf"), False),
    ],
)
def test_is_numeric(nodes, weight, expected):
    """Test which weights take part in numeric computations."""
    a, b = nodes
    assert Edge(weight=weight, from_node=a, to_node=b).is_numeric is expected
