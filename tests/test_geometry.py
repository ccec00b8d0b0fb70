"""
Tests for graphsketch.geometry hit-testing.
"""

import math

import pytest

from graphsketch.geometry import distance_to_segment, find_edge_at, find_node_at
from graphsketch.model import Graph


class TestDistanceToSegment:
    """Point to segment distance."""

    def test_point_on_segment(self):
        assert distance_to_segment(5, 0, 0, 0, 10, 0) == 0

    def test_perpendicular_distance(self):
        assert distance_to_segment(5, 3, 0, 0, 10, 0) == pytest.approx(3)

    def test_before_start_clamps_to_start(self):
        assert distance_to_segment(-3, 4, 0, 0, 10, 0) == pytest.approx(5)

    def test_past_end_clamps_to_end(self):
        assert distance_to_segment(13, 4, 0, 0, 10, 0) == pytest.approx(5)

    def test_zero_length_segment(self):
        assert distance_to_segment(3, 4, 1, 1, 1, 1) == pytest.approx(math.hypot(2, 3))


class TestFindNodeAt:
    """Node picking."""

    def test_hit_at_centre(self, two_nodes):
        assert find_node_at(two_nodes, (200, 200), 20) == 1

    def test_hit_on_boundary(self, two_nodes):
        assert find_node_at(two_nodes, (30, 10), 20) == 0

    def test_miss(self, two_nodes):
        assert find_node_at(two_nodes, (100, 100), 20) is None

    def test_empty_graph(self, graph):
        assert find_node_at(graph, (0, 0), 20) is None

    def test_overlap_resolves_to_lowest_index(self):
        g = Graph()
        g.add_node(50, 50)
        g.add_node(55, 50)
        assert find_node_at(g, (53, 50), 20) == 0

    def test_moved_node_is_found_at_new_centre(self, two_nodes):
        two_nodes.move_node(0, 400, 120)
        assert find_node_at(two_nodes, (400, 120), 20) == 0
        assert find_node_at(two_nodes, (10, 10), 20) is None


class TestFindEdgeAt:
    """Edge picking."""

    def test_midpoint_hits(self, connected_pair):
        assert find_edge_at(connected_pair, (105, 105), 10) == 0

    def test_just_outside_tolerance_misses(self):
        g = Graph()
        g.add_node(0, 0)
        g.add_node(100, 0)
        g.add_edge(0, 1)
        assert find_edge_at(g, (50, 9.9), 10) == 0
        assert find_edge_at(g, (50, 10.001), 10) is None

    def test_beyond_endpoint_uses_endpoint_distance(self):
        g = Graph()
        g.add_node(0, 0)
        g.add_node(100, 0)
        g.add_edge(0, 1)
        assert find_edge_at(g, (105, 0), 10) == 0
        assert find_edge_at(g, (111, 0), 10) is None

    def test_crossing_edges_resolve_to_lowest_index(self):
        g = Graph()
        for x, y in [(0, 0), (100, 100), (0, 100), (100, 0)]:
            g.add_node(x, y)
        g.add_edge(2, 3)
        g.add_edge(0, 1)
        assert find_edge_at(g, (50, 50), 10) == 0
        assert g.edges[0].source == 2

    def test_no_edges(self, two_nodes):
        assert find_edge_at(two_nodes, (105, 105), 10) is None
