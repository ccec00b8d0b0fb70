"""Main GraphSketch application."""

import logging
import os
import sys
from typing import Optional

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Gtk, Gio, Adw

from graphsketch import __version__, __app_id__
from graphsketch.canvas import GraphCanvas
from graphsketch.config import EditorSettings

logger = logging.getLogger(__name__)


class GraphSketchWindow(Adw.ApplicationWindow):
    """Main application window."""

    def __init__(self, app: Adw.Application, settings: EditorSettings):
        super().__init__(application=app)
        self.settings = settings

        # Window setup
        self.set_title("GraphSketch")

        # Build UI
        self._build_ui()

        # Setup keyboard shortcuts
        self._setup_shortcuts()

        # A new session always starts from a random graph
        self.canvas.regenerate(settings.surface_width, settings.surface_height)

    def _build_ui(self):
        """Build the main UI layout."""
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        # Header bar
        header = self._build_header()
        main_box.append(header)

        # Canvas
        self.canvas = GraphCanvas(self.settings)
        self.canvas.on_graph_changed = self._on_graph_changed

        canvas_frame = Gtk.Frame()
        canvas_frame.set_child(self.canvas)
        main_box.append(canvas_frame)

        self.set_content(main_box)

    def _build_header(self) -> Adw.HeaderBar:
        """Build the header bar."""
        header = Adw.HeaderBar()

        # Menu button
        menu_btn = Gtk.MenuButton()
        menu_btn.set_icon_name("open-menu-symbolic")
        menu_btn.set_tooltip_text("Menu")

        menu = Gio.Menu()

        graph_section = Gio.Menu()
        graph_section.append("New Random Graph", "win.regenerate")
        graph_section.append("Clear Selection", "win.clear-selection")
        menu.append_section(None, graph_section)

        help_section = Gio.Menu()
        help_section.append("About GraphSketch", "win.show-about")
        menu.append_section(None, help_section)

        popover = Gtk.PopoverMenu()
        popover.set_menu_model(menu)
        menu_btn.set_popover(popover)
        header.pack_end(menu_btn)

        # Regenerate button
        regen_btn = Gtk.Button()
        regen_btn.set_icon_name("view-refresh-symbolic")
        regen_btn.set_tooltip_text("New Random Graph (Ctrl+N)")
        regen_btn.set_action_name("win.regenerate")
        header.pack_start(regen_btn)

        self.title_widget = Adw.WindowTitle(title="GraphSketch", subtitle="")
        header.set_title_widget(self.title_widget)

        return header

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        actions = [
            ("regenerate", self._regenerate, "<Control>n"),
            ("clear-selection", self.canvas.clear_selection, "Escape"),
            ("show-about", self._show_about, None),
            ("quit", lambda: self.close(), "<Control>q"),
        ]

        for name, callback, accel in actions:
            action = Gio.SimpleAction.new(name, None)
            action.connect("activate", lambda a, p, cb=callback: cb())
            self.add_action(action)

            if accel:
                self.get_application().set_accels_for_action(f"win.{name}", [accel])

    def _regenerate(self):
        logger.info("Regenerating graph")
        self.canvas.regenerate()

    def _on_graph_changed(self):
        graph = self.canvas.graph
        self.title_widget.set_subtitle(
            f"{graph.node_count} nodes, {graph.edge_count} edges"
        )

    def _show_about(self):
        """Show about dialog."""
        about = Adw.AboutWindow(
            transient_for=self,
            application_name="GraphSketch",
            application_icon="applications-graphics",
            developer_name="GraphSketch Project",
            version=__version__,
            license_type=Gtk.License.MIT_X11,
            comments=(
                "Click empty space to add a node, click two nodes to connect "
                "them, click an edge to remove it, drag to move and "
                "double-click to recolour."
            ),
        )
        about.present()


class GraphSketchApp(Adw.Application):
    """Main application class."""

    def __init__(self, settings: Optional[EditorSettings] = None):
        super().__init__(
            application_id=__app_id__,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS
        )
        self.settings = settings or EditorSettings.from_env()
        self.window: Optional[GraphSketchWindow] = None

    def do_activate(self):
        """Activate application."""
        if not self.window:
            self.window = GraphSketchWindow(self, self.settings)

        self.window.present()


def configure_logging():
    level_name = os.environ.get("GRAPHSKETCH_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Application entry point."""
    configure_logging()
    app = GraphSketchApp()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
