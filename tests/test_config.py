"""
Tests for graphsketch.config.
"""

from graphsketch.config import DEFAULT_PALETTE, EditorSettings


class TestEditorSettings:
    """Defaults and environment overrides."""

    def test_defaults(self):
        settings = EditorSettings()
        assert settings.node_radius == 20
        assert settings.edge_tolerance == 10
        assert settings.palette == DEFAULT_PALETTE
        assert settings.palette_size == 3
        assert settings.seed is None

    def test_empty_environment_gives_defaults(self):
        assert EditorSettings.from_env({}) == EditorSettings()

    def test_overrides(self):
        settings = EditorSettings.from_env({
            "GRAPHSKETCH_SEED": "7",
            "GRAPHSKETCH_NODE_RADIUS": "30",
            "GRAPHSKETCH_SURFACE_SIZE": "500",
        })
        assert settings.seed == 7
        assert settings.node_radius == 30
        assert (settings.surface_width, settings.surface_height) == (500, 500)

    def test_malformed_values_are_ignored(self):
        settings = EditorSettings.from_env({
            "GRAPHSKETCH_SEED": "abc",
            "GRAPHSKETCH_NODE_RADIUS": "-4",
            "GRAPHSKETCH_SURFACE_SIZE": "",
        })
        assert settings == EditorSettings()

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GRAPHSKETCH_SEED", "99")
        assert EditorSettings.from_env().seed == 99
