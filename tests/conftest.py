"""Shared fixtures for GraphSketch tests."""

import os
import sys

import pytest

# Allow running the suite from a source checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from graphsketch.config import EditorSettings  # noqa: E402
from graphsketch.interaction import InteractionState  # noqa: E402
from graphsketch.model import Graph  # noqa: E402


@pytest.fixture
def settings():
    return EditorSettings()


@pytest.fixture
def graph():
    return Graph()


@pytest.fixture
def state():
    return InteractionState()


@pytest.fixture
def two_nodes():
    """Nodes 0 at (10, 10) and 1 at (200, 200), no edges."""
    g = Graph()
    g.add_node(10, 10)
    g.add_node(200, 200)
    return g


@pytest.fixture
def connected_pair(two_nodes):
    two_nodes.add_edge(0, 1)
    return two_nodes
