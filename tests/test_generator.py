"""
Tests for graphsketch.generator.
"""

import random
from dataclasses import replace

import pytest

from graphsketch.generator import random_graph


class TestRandomGraph:
    """Random starting graphs."""

    @pytest.mark.parametrize("seed", range(25))
    def test_node_count_in_range(self, settings, seed):
        g = random_graph(700, 700, settings, random.Random(seed))
        assert settings.min_nodes <= g.node_count <= settings.max_nodes

    @pytest.mark.parametrize("seed", range(25))
    def test_nodes_fit_inside_surface(self, settings, seed):
        r = settings.node_radius
        g = random_graph(400, 300, settings, random.Random(seed))
        for node in g.nodes:
            assert r <= node.x <= 400 - r
            assert r <= node.y <= 300 - r

    @pytest.mark.parametrize("seed", range(25))
    def test_edges_are_valid_and_unique(self, settings, seed):
        g = random_graph(700, 700, settings, random.Random(seed))
        assert 1 <= g.edge_count <= 2 * g.node_count
        pairs = set()
        for edge in g.edges:
            assert 0 <= edge.source < edge.target < g.node_count
            pairs.add((edge.source, edge.target))
        assert len(pairs) == g.edge_count

    def test_nodes_start_with_first_colour(self, settings):
        g = random_graph(700, 700, settings, random.Random(3))
        assert all(node.color_index == 0 for node in g.nodes)

    def test_small_graph_terminates(self, settings):
        tiny = replace(settings, min_nodes=2, max_nodes=2)
        for seed in range(10):
            g = random_graph(700, 700, tiny, random.Random(seed))
            assert g.node_count == 2
            assert g.edge_count == 1

    def test_single_node_has_no_edges(self, settings):
        single = replace(settings, min_nodes=1, max_nodes=1)
        g = random_graph(700, 700, single, random.Random(0))
        assert g.node_count == 1
        assert g.edge_count == 0

    def test_surface_smaller_than_node(self, settings):
        g = random_graph(10, 10, settings, random.Random(1))
        for node in g.nodes:
            assert node.x == settings.node_radius
            assert node.y == settings.node_radius

    def test_seeded_settings_are_reproducible(self, settings):
        seeded = replace(settings, seed=42)
        a = random_graph(700, 700, seeded)
        b = random_graph(700, 700, seeded)
        assert [(n.x, n.y) for n in a.nodes] == [(n.x, n.y) for n in b.nodes]
        assert a.edges == b.edges

    def test_palette_size_follows_settings(self, settings):
        two_colours = replace(settings, palette=("#000000", "#ffffff"))
        g = random_graph(700, 700, two_colours, random.Random(0))
        assert g.palette_size == 2
