"""Cairo drawing for the graph editor.

Rendering is a pure projection of the graph and interaction state: nothing
here mutates either of them.
"""

import math
from typing import Tuple

import cairo

from graphsketch.config import DEFAULT_SETTINGS, EditorSettings
from graphsketch.interaction import InteractionState
from graphsketch.model import Graph

RGB = Tuple[float, float, float]


def hex_to_rgb(color: str) -> RGB:
    """Parse ``#rrggbb`` (or ``#rgb``) into cairo's 0..1 components."""
    value = color.lstrip('#')
    if len(value) == 3:
        value = ''.join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"not a hex colour: {color!r}")
    r = int(value[0:2], 16) / 255
    g = int(value[2:4], 16) / 255
    b = int(value[4:6], 16) / 255
    return (r, g, b)


def draw_scene(cr, width: float, height: float, graph: Graph,
               state: InteractionState,
               settings: EditorSettings = DEFAULT_SETTINGS):
    """Clear the surface and draw edges, then nodes on top."""
    cr.save()

    cr.set_source_rgb(*hex_to_rgb(settings.background))
    cr.rectangle(0, 0, width, height)
    cr.fill()

    _draw_edges(cr, graph, settings)

    for index, node in enumerate(graph.nodes):
        _draw_node(cr, index, node.x, node.y, node.color_index,
                   index == state.highlighted, settings)

    cr.restore()


def _draw_edges(cr, graph: Graph, settings: EditorSettings):
    cr.set_source_rgb(*hex_to_rgb(settings.edge_color))
    cr.set_line_width(1)
    for i in range(graph.edge_count):
        a, b = graph.edge_endpoints(i)
        cr.move_to(a.x, a.y)
        cr.line_to(b.x, b.y)
        cr.stroke()


def _draw_node(cr, index: int, x: float, y: float, color_index: int,
               is_highlighted: bool, settings: EditorSettings):
    cr.new_path()
    cr.arc(x, y, settings.node_radius, 0, 2 * math.pi)
    cr.set_source_rgb(*hex_to_rgb(settings.palette[color_index]))
    cr.fill_preserve()

    if is_highlighted:
        cr.set_source_rgb(*hex_to_rgb(settings.highlight_color))
        cr.set_line_width(settings.highlight_width)
    else:
        cr.set_source_rgb(*hex_to_rgb(settings.outline_color))
        cr.set_line_width(settings.outline_width)
    cr.stroke()

    # Index label, centred on the node
    label = str(index)
    cr.select_font_face(settings.font_family, cairo.FONT_SLANT_NORMAL,
                        cairo.FONT_WEIGHT_NORMAL)
    cr.set_font_size(settings.font_size)
    x_bearing, y_bearing, text_width, text_height, _, _ = cr.text_extents(label)
    cr.move_to(x - text_width / 2 - x_bearing, y - text_height / 2 - y_bearing)
    cr.set_source_rgb(*hex_to_rgb(settings.label_color))
    cr.show_text(label)
