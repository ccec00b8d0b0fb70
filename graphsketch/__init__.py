"""GraphSketch - an interactive node and edge sketchpad."""

__version__ = "1.0.0"
__app_id__ = "io.github.graphsketch.GraphSketch"
