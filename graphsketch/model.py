"""In-memory graph model for GraphSketch.

Nodes are addressed by their position in ``Graph.nodes``. Positions are
assigned on creation and never reused because nodes are never removed.
Edges are addressed by their position in ``Graph.edges``; removing an edge
shifts every later edge down by one, so callers must not hold on to edge
indices across a mutating call.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from graphsketch.config import DEFAULT_PALETTE

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """A positioned, coloured point on the drawing surface."""
    x: float
    y: float
    color_index: int = 0


@dataclass(frozen=True)
class Edge:
    """Undirected connection, stored with ``source < target``."""
    source: int
    target: int

    def connects(self, a: int, b: int) -> bool:
        return {self.source, self.target} == {a, b}


class Graph:
    """Ordered nodes plus a de-duplicated list of undirected edges."""

    def __init__(self, palette_size: int = len(DEFAULT_PALETTE)):
        if palette_size < 1:
            raise ValueError("palette_size must be at least 1")
        self.palette_size = palette_size
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def _check_node(self, index: int):
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"node index {index} out of range")

    def add_node(self, x: float, y: float) -> int:
        """Append a node with the first palette colour and return its index."""
        self.nodes.append(Node(x=x, y=y))
        index = len(self.nodes) - 1
        logger.debug("Added node %d at (%.1f, %.1f)", index, x, y)
        return index

    def has_edge(self, a: int, b: int) -> bool:
        return self.find_edge(a, b) is not None

    def add_edge(self, a: int, b: int) -> bool:
        """Connect two nodes.

        Self-loops and duplicates (in either direction) are ignored.
        Returns True only when a new edge was stored.
        """
        self._check_node(a)
        self._check_node(b)
        if a == b or self.has_edge(a, b):
            return False
        self.edges.append(Edge(source=min(a, b), target=max(a, b)))
        logger.debug("Added edge %d-%d", min(a, b), max(a, b))
        return True

    def remove_edge(self, edge_index: int) -> Edge:
        """Remove the edge at ``edge_index``; later edges shift down."""
        edge = self.edges.pop(edge_index)
        logger.debug("Removed edge %d-%d", edge.source, edge.target)
        return edge

    def cycle_node_color(self, index: int) -> int:
        """Advance a node to the next palette colour and return it."""
        node = self.nodes[index]
        node.color_index = (node.color_index + 1) % self.palette_size
        logger.debug("Node %d colour -> %d", index, node.color_index)
        return node.color_index

    def move_node(self, index: int, x: float, y: float):
        node = self.nodes[index]
        node.x = x
        node.y = y

    def edge_endpoints(self, edge_index: int) -> Tuple[Node, Node]:
        edge = self.edges[edge_index]
        return self.nodes[edge.source], self.nodes[edge.target]

    def find_edge(self, a: int, b: int) -> Optional[int]:
        """Return the index of the edge joining ``a`` and ``b``, if any."""
        for i, edge in enumerate(self.edges):
            if edge.connects(a, b):
                return i
        return None
