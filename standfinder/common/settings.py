"""
Settings for Stand Finder (frontend-independent).

Provides a single source of truth for:
- Catalog location (bundled stands list by default)
- Chart canvas size
- Last submitted URL (restored into the input field)

Settings are persisted to JSON and can be overridden by environment variables.

Usage:
    from standfinder.common.settings import Settings

    settings = Settings()
    settings.canvas_size = 500
    settings.save()

    # Environment variables override:
    # STANDFINDER_CATALOG, STANDFINDER_CANVAS_SIZE
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

_logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

SETTINGS_FILENAME = "standfinder_settings.json"
DEFAULT_SETTINGS_DIR = Path.home() / ".standfinder"

ENV_CATALOG = "STANDFINDER_CATALOG"
ENV_CANVAS_SIZE = "STANDFINDER_CANVAS_SIZE"

# Outer scale ring has radius 150, so anything below 300 px clips it
DEFAULT_CANVAS_SIZE = 400
MIN_CANVAS_SIZE = 320
MAX_CANVAS_SIZE = 2000

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


# =============================================================================
# Helper Functions
# =============================================================================


def safe_int(value: Any, default: int) -> int:
    """int conversion. None/bool/float/unparseable -> default.

    bool is an int subclass but returns default, so True never becomes 1.
    """
    if value is None or isinstance(value, (bool, float)):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_bool(value: Any, default: bool = False) -> bool:
    """bool conversion. Unrecognised strings ("fasle") -> default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
    return default


def clamp_canvas_size(value: Any) -> int:
    size = safe_int(value, DEFAULT_CANVAS_SIZE)
    return max(MIN_CANVAS_SIZE, min(MAX_CANVAS_SIZE, size))


# =============================================================================
# Settings Data Class
# =============================================================================


@dataclass
class AppSettings:
    """Application settings with defaults."""

    # Empty means the bundled catalog
    catalog_path: str = ""
    canvas_size: int = DEFAULT_CANVAS_SIZE

    last_url: str = ""
    remember_last_url: bool = True

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary, ignoring unknown keys and coercing bad values to defaults."""
        defaults = cls()
        catalog_path = data.get("catalog_path", defaults.catalog_path)
        last_url = data.get("last_url", defaults.last_url)
        return cls(
            catalog_path=catalog_path if isinstance(catalog_path, str) else defaults.catalog_path,
            canvas_size=clamp_canvas_size(data.get("canvas_size", defaults.canvas_size)),
            last_url=last_url if isinstance(last_url, str) else defaults.last_url,
            remember_last_url=safe_bool(data.get("remember_last_url"), defaults.remember_last_url),
        )


# =============================================================================
# Settings Manager
# =============================================================================


class Settings:
    """
    Settings manager for Stand Finder.

    Handles:
    - JSON file persistence
    - Environment variable overrides (read-only, never written back)
    """

    def __init__(self, settings_dir: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            settings_dir: Directory for settings file.
                         Defaults to ~/.standfinder.
        """
        if settings_dir is None:
            settings_dir = DEFAULT_SETTINGS_DIR

        self._settings_dir = Path(settings_dir)
        self._settings_path = self._settings_dir / SETTINGS_FILENAME
        self._settings = self._load()

    # -------------------------------------------------------------------------
    # File Path
    # -------------------------------------------------------------------------

    @property
    def settings_path(self) -> Path:
        """Path to the settings JSON file."""
        return self._settings_path

    # -------------------------------------------------------------------------
    # Values (with environment variable override)
    # -------------------------------------------------------------------------

    @property
    def catalog_path(self) -> Optional[Path]:
        """Catalog file, or None for the bundled catalog. STANDFINDER_CATALOG env var overrides."""
        value = os.environ.get(ENV_CATALOG) or self._settings.catalog_path
        return Path(value).expanduser() if value.strip() else None

    @catalog_path.setter
    def catalog_path(self, value: Optional[str]) -> None:
        self._settings.catalog_path = str(value) if value else ""

    @property
    def canvas_size(self) -> int:
        """Chart canvas edge in pixels. STANDFINDER_CANVAS_SIZE env var overrides."""
        env_value = os.environ.get(ENV_CANVAS_SIZE)
        if env_value:
            return clamp_canvas_size(env_value)
        return self._settings.canvas_size

    @canvas_size.setter
    def canvas_size(self, value: int) -> None:
        self._settings.canvas_size = clamp_canvas_size(value)

    @property
    def last_url(self) -> str:
        return self._settings.last_url if self._settings.remember_last_url else ""

    @last_url.setter
    def last_url(self, value: str) -> None:
        if self._settings.remember_last_url:
            self._settings.last_url = value

    @property
    def remember_last_url(self) -> bool:
        return self._settings.remember_last_url

    @remember_last_url.setter
    def remember_last_url(self, value: bool) -> None:
        self._settings.remember_last_url = bool(value)
        if not value:
            self._settings.last_url = ""

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _load(self) -> AppSettings:
        """Load settings from file, falling back to defaults."""
        if not self._settings_path.exists():
            return AppSettings()
        try:
            with open(self._settings_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            _logger.warning("Corrupt settings file %s: %s", self._settings_path, e)
            return AppSettings()
        if not isinstance(data, dict):
            _logger.warning("Settings file %s does not hold an object, using defaults", self._settings_path)
            return AppSettings()
        return AppSettings.from_dict(data)

    def save(self) -> None:
        """Save settings to JSON atomically (temp file + os.replace).

        Raises:
            OSError: If the file cannot be written.
        """
        self._settings_dir.mkdir(parents=True, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(suffix=".tmp", dir=self._settings_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self._settings_path)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
        _logger.debug("Saved settings to %s", self._settings_path)

    def to_dict(self) -> dict:
        return self._settings.to_dict()
