"""Hit-testing helpers that resolve surface coordinates to graph elements."""

import math
from typing import Optional, Tuple

from graphsketch.model import Graph

Point = Tuple[float, float]


def distance_to_segment(px: float, py: float,
                        x1: float, y1: float,
                        x2: float, y2: float) -> float:
    """Euclidean distance from (px, py) to the segment (x1, y1)-(x2, y2)."""
    dx = x2 - x1
    dy = y2 - y1
    len_sq = dx * dx + dy * dy

    # Degenerate segment: measure to the first endpoint
    t = -1.0
    if len_sq != 0:
        t = ((px - x1) * dx + (py - y1) * dy) / len_sq

    if t < 0:
        nearest_x, nearest_y = x1, y1
    elif t > 1:
        nearest_x, nearest_y = x2, y2
    else:
        nearest_x = x1 + t * dx
        nearest_y = y1 + t * dy

    return math.hypot(px - nearest_x, py - nearest_y)


def find_node_at(graph: Graph, point: Point, radius: float) -> Optional[int]:
    """Return the lowest-indexed node whose circle contains ``point``."""
    px, py = point
    for i, node in enumerate(graph.nodes):
        if math.hypot(node.x - px, node.y - py) <= radius:
            return i
    return None


def find_edge_at(graph: Graph, point: Point, tolerance: float) -> Optional[int]:
    """Return the lowest-indexed edge passing closer than ``tolerance``."""
    px, py = point
    for i in range(graph.edge_count):
        a, b = graph.edge_endpoints(i)
        if distance_to_segment(px, py, a.x, a.y, b.x, b.y) < tolerance:
            return i
    return None
