"""Drawing area that hosts the graph editor."""

import logging
import random
from typing import Callable, Optional

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from graphsketch.config import EditorSettings
from graphsketch.generator import random_graph
from graphsketch.interaction import (
    EventKind, InteractionState, PointerEvent, dispatch,
)
from graphsketch.model import Graph
from graphsketch.render import draw_scene

logger = logging.getLogger(__name__)


class GraphCanvas(Gtk.DrawingArea):
    """Owns the session's graph and interaction state.

    GTK gestures are translated into ``PointerEvent``s in widget-local
    coordinates; the surface is redrawn whenever an event changes something
    and whenever the widget is resized.
    """

    def __init__(self, settings: EditorSettings, rng: Optional[random.Random] = None):
        super().__init__()

        self.settings = settings
        self.rng = rng or random.Random(settings.seed)
        self.graph: Graph = Graph(palette_size=settings.palette_size)
        self.state = InteractionState()

        # Press position of the active drag gesture; GestureDrag reports offsets
        self._press_x = 0.0
        self._press_y = 0.0

        # Callbacks
        self.on_graph_changed: Optional[Callable[[], None]] = None

        self.set_content_width(settings.surface_width)
        self.set_content_height(settings.surface_height)
        self.set_hexpand(True)
        self.set_vexpand(True)

        self.set_draw_func(self._on_draw)
        self.connect("resize", self._on_resize)
        self._setup_event_controllers()

    def _setup_event_controllers(self):
        """Setup pointer event controllers."""
        # Press, motion and release of the primary button
        drag_ctrl = Gtk.GestureDrag()
        drag_ctrl.set_button(1)
        drag_ctrl.connect("drag-begin", self._on_drag_begin)
        drag_ctrl.connect("drag-update", self._on_drag_update)
        drag_ctrl.connect("drag-end", self._on_drag_end)
        self.add_controller(drag_ctrl)

        # Double click
        click_ctrl = Gtk.GestureClick()
        click_ctrl.set_button(1)
        click_ctrl.connect("pressed", self._on_click)
        self.add_controller(click_ctrl)

    def regenerate(self, width: Optional[float] = None, height: Optional[float] = None):
        """Replace the graph with a fresh random one."""
        width = width or self.get_width() or self.settings.surface_width
        height = height or self.get_height() or self.settings.surface_height
        self.graph = random_graph(width, height, self.settings, self.rng)
        self.state.reset()
        self._changed()

    def clear_selection(self):
        if self.state.highlighted is None:
            return
        self.state.highlighted = None
        self.queue_draw()

    def handle_event(self, event: PointerEvent) -> bool:
        """Apply a pointer event and redraw if needed."""
        changed = dispatch(event, self.graph, self.state, self.settings)
        if changed:
            self._changed()
        return changed

    def _changed(self):
        self.queue_draw()
        if self.on_graph_changed:
            self.on_graph_changed()

    def _on_draw(self, area, cr, width, height):
        """Main drawing function."""
        draw_scene(cr, width, height, self.graph, self.state, self.settings)

    def _on_resize(self, area, width, height):
        # Positions are kept as-is; nodes may end up outside a shrunk surface
        logger.debug("Surface resized to %dx%d", width, height)
        self.queue_draw()

    def _on_drag_begin(self, gesture, start_x, start_y):
        self.grab_focus()
        self._press_x = start_x
        self._press_y = start_y
        self.handle_event(PointerEvent(EventKind.POINTER_DOWN, start_x, start_y))

    def _on_drag_update(self, gesture, offset_x, offset_y):
        self.handle_event(PointerEvent(EventKind.POINTER_MOVE,
                                       self._press_x + offset_x,
                                       self._press_y + offset_y))

    def _on_drag_end(self, gesture, offset_x, offset_y):
        self.handle_event(PointerEvent(EventKind.POINTER_UP,
                                       self._press_x + offset_x,
                                       self._press_y + offset_y))

    def _on_click(self, gesture, n_press, x, y):
        if n_press == 2:
            self.handle_event(PointerEvent(EventKind.DOUBLE_CLICK, x, y))
