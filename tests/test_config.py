"""Tests for environment-driven configuration."""

import pytest

from pathgrid.config import Config


def test_defaults_validate():
    Config.validate()


@pytest.mark.parametrize(
    "attr,value",
    [
        ("DEFAULT_WIDTH", 0),
        ("DEFAULT_HEIGHT", -3),
        ("MAX_GRID_SIZE", 0),
        ("DEFAULT_WIDTH", 101),
        ("MAX_BRUSH_LAYERS", 0),
        ("REACHABILITY", "hex"),
        ("STRATEGY", "dijkstra"),
    ],
)
def test_validate_rejects_bad_values(monkeypatch, attr, value):
    monkeypatch.setattr(Config, "MAX_GRID_SIZE", 100)
    monkeypatch.setattr(Config, attr, value)

    with pytest.raises(ValueError):
        Config.validate()


def test_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_WIDTH", 12)
    monkeypatch.setattr(Config, "DEFAULT_HEIGHT", 8)
    monkeypatch.setattr(Config, "STRATEGY", "bfs")

    text = Config.display()

    assert text.startswith("Pathgrid Configuration:")
    assert "Default Size: 12x8" in text
    assert "Strategy: bfs" in text
