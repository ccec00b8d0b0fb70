"""Random starting graphs."""

import logging
import random
from typing import Optional

from graphsketch.config import DEFAULT_SETTINGS, EditorSettings
from graphsketch.model import Graph

logger = logging.getLogger(__name__)

# Random pair picks allowed per requested edge before giving up
ATTEMPTS_PER_EDGE = 20


def random_graph(width: float, height: float,
                 settings: EditorSettings = DEFAULT_SETTINGS,
                 rng: Optional[random.Random] = None) -> Graph:
    """Build a graph of ``min_nodes``..``max_nodes`` nodes with random edges.

    Every node circle fits inside a ``width`` x ``height`` surface (when the
    surface is smaller than one node, nodes sit on the radius line). The edge
    target is drawn from 1..2n and capped at the number of distinct pairs.
    """
    rng = rng or random.Random(settings.seed)
    r = settings.node_radius
    graph = Graph(palette_size=settings.palette_size)

    node_count = rng.randint(settings.min_nodes, settings.max_nodes)
    for _ in range(node_count):
        x = rng.uniform(r, max(r, width - r))
        y = rng.uniform(r, max(r, height - r))
        graph.add_node(x, y)

    if node_count < 2:
        return graph

    max_pairs = node_count * (node_count - 1) // 2
    target = min(rng.randint(1, node_count * 2), max_pairs)
    attempts = target * ATTEMPTS_PER_EDGE
    while graph.edge_count < target and attempts > 0:
        attempts -= 1
        a, b = rng.sample(range(node_count), 2)
        graph.add_edge(a, b)

    logger.info("Generated graph with %d nodes and %d edges (target %d)",
                graph.node_count, graph.edge_count, target)
    return graph
