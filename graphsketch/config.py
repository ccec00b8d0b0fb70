"""Editor settings for GraphSketch."""

import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple


DEFAULT_PALETTE: Tuple[str, ...] = ("#4CAF50", "#f44336", "#2196F3")  # green, red, blue


@dataclass(frozen=True)
class EditorSettings:
    """Sizes, colours and generation bounds used by the editor."""
    node_radius: float = 20.0
    edge_tolerance: float = 10.0
    drag_threshold: float = 5.0
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    edge_color: str = "#666666"
    outline_color: str = "#333333"
    highlight_color: str = "#000000"
    outline_width: float = 1.0
    highlight_width: float = 3.0
    label_color: str = "#ffffff"
    font_family: str = "Arial"
    font_size: float = 16.0
    background: str = "#ffffff"
    min_nodes: int = 3
    max_nodes: int = 7
    surface_width: int = 700
    surface_height: int = 700
    seed: Optional[int] = None

    @property
    def palette_size(self) -> int:
        return len(self.palette)

    @classmethod
    def from_env(cls, environ=None) -> "EditorSettings":
        """Build settings, applying GRAPHSKETCH_* overrides.

        Values that don't parse are ignored so a typo never stops the editor
        from starting.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        seed = _parse_int(env.get("GRAPHSKETCH_SEED"))
        if seed is not None:
            settings = replace(settings, seed=seed)

        radius = _parse_int(env.get("GRAPHSKETCH_NODE_RADIUS"))
        if radius is not None and radius > 0:
            settings = replace(settings, node_radius=float(radius))

        size = _parse_int(env.get("GRAPHSKETCH_SURFACE_SIZE"))
        if size is not None and size > 0:
            settings = replace(settings, surface_width=size, surface_height=size)

        return settings


def _parse_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


DEFAULT_SETTINGS = EditorSettings()
