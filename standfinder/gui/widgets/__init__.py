"""Widgets package - uses lazy imports to avoid triggering Kivy initialization."""

from __future__ import annotations

from typing import Any

__all__ = ["StandRadarWidget"]

# Lazy loading to avoid Kivy initialization when importing non-Kivy modules
# like radar_geometry.py


def __getattr__(name: str) -> Any:
    """Lazy load Kivy-dependent widgets on first access."""
    if name == "StandRadarWidget":
        from standfinder.gui.widgets.radar_chart import StandRadarWidget

        return StandRadarWidget
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
