"""Pointer gesture handling for the graph editor.

The editor has three modes:

* ``IDLE`` - nothing highlighted, no drag in progress.
* ``NODE_SELECTED`` - one node is highlighted and the next node click
  connects it to the clicked node.
* ``DRAGGING`` - the pointer went down on a node and that node follows
  pointer motion until release.

Pressing on an unhighlighted node both highlights it and starts a drag.
Whether the gesture was a "select" or a "drag" is decided on release: if the
pointer travelled at least ``drag_threshold`` from the press point, the node
was repositioned and the highlight is dropped; otherwise the node stays
highlighted for a following edge-forming click.

Handlers mutate the ``Graph`` and ``InteractionState`` they are given and
return True when the surface needs to be redrawn.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from graphsketch.config import DEFAULT_SETTINGS, EditorSettings
from graphsketch.geometry import find_edge_at, find_node_at
from graphsketch.model import Graph

logger = logging.getLogger(__name__)


class Mode(Enum):
    IDLE = "idle"
    NODE_SELECTED = "node_selected"
    DRAGGING = "dragging"


class EventKind(Enum):
    """Pointer events delivered by the host, in surface coordinates."""
    POINTER_DOWN = "pointer_down"
    POINTER_MOVE = "pointer_move"
    POINTER_UP = "pointer_up"
    DOUBLE_CLICK = "double_click"


@dataclass(frozen=True)
class PointerEvent:
    kind: EventKind
    x: float
    y: float


@dataclass
class InteractionState:
    """Transient selection and drag state for one editing session."""
    highlighted: Optional[int] = None
    drag_target: Optional[int] = None
    dragging: bool = False
    moved: bool = False
    press_x: float = 0.0
    press_y: float = 0.0

    @property
    def mode(self) -> Mode:
        if self.dragging:
            return Mode.DRAGGING
        if self.highlighted is not None:
            return Mode.NODE_SELECTED
        return Mode.IDLE

    def end_drag(self):
        self.dragging = False
        self.drag_target = None
        self.moved = False
        self.press_x = 0.0
        self.press_y = 0.0

    def reset(self):
        self.highlighted = None
        self.end_drag()


def pointer_down(graph: Graph, state: InteractionState, x: float, y: float,
                 settings: EditorSettings = DEFAULT_SETTINGS) -> bool:
    """Resolve the press target (node, then edge, then empty space) and act."""
    # A press always starts a fresh gesture
    state.end_drag()

    node = find_node_at(graph, (x, y), settings.node_radius)
    if node is not None:
        if state.highlighted is None:
            state.highlighted = node
            state.dragging = True
            state.drag_target = node
            state.press_x = x
            state.press_y = y
            logger.debug("Selected node %d, drag armed", node)
        else:
            if state.highlighted != node:
                graph.add_edge(state.highlighted, node)
            else:
                logger.debug("Deselected node %d", node)
            state.highlighted = None
        return True

    edge = find_edge_at(graph, (x, y), settings.edge_tolerance)
    if edge is not None:
        graph.remove_edge(edge)
        state.highlighted = None
        return True

    graph.add_node(x, y)
    state.highlighted = None
    return True


def pointer_move(graph: Graph, state: InteractionState, x: float, y: float,
                 settings: EditorSettings = DEFAULT_SETTINGS) -> bool:
    if not state.dragging or state.drag_target is None:
        return False
    graph.move_node(state.drag_target, x, y)
    # Jitter within the threshold still counts as a plain click
    if math.hypot(x - state.press_x, y - state.press_y) >= settings.drag_threshold:
        state.moved = True
    return True


def pointer_up(graph: Graph, state: InteractionState, x: float, y: float,
               settings: EditorSettings = DEFAULT_SETTINGS) -> bool:
    """Finish a drag. A drag that moved the node also drops the highlight."""
    if not state.dragging:
        return False

    moved = state.moved
    if moved:
        logger.debug("Dropped node %d at (%.1f, %.1f)", state.drag_target, x, y)
        state.highlighted = None
    state.end_drag()
    return moved


def double_click(graph: Graph, state: InteractionState, x: float, y: float,
                 settings: EditorSettings = DEFAULT_SETTINGS) -> bool:
    """Cycle the colour of the node under the pointer, if any."""
    node = find_node_at(graph, (x, y), settings.node_radius)
    if node is None:
        return False
    graph.cycle_node_color(node)
    return True


_HANDLERS = {
    EventKind.POINTER_DOWN: pointer_down,
    EventKind.POINTER_MOVE: pointer_move,
    EventKind.POINTER_UP: pointer_up,
    EventKind.DOUBLE_CLICK: double_click,
}


def dispatch(event: PointerEvent, graph: Graph, state: InteractionState,
             settings: EditorSettings = DEFAULT_SETTINGS) -> bool:
    """Apply one pointer event. Returns True if a redraw is needed."""
    handler = _HANDLERS[event.kind]
    return handler(graph, state, event.x, event.y, settings)
