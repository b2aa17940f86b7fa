"""Kivy-independent core: URL parsing, normalization, catalog matching.

Nothing in this package imports Kivy or Qt, so it can be used from either
frontend and from headless tests.
"""

from standfinder.core.errors import (
    CatalogError,
    EmptyCatalogError,
    InvalidFormatError,
    StandFinderError,
)
from standfinder.core.models import (
    BUCKET_LABELS,
    CHART_AXIS_ORDER,
    CatalogEntry,
    RawScoreVector,
    StatAxis,
    TraitLevels,
    bucket_label,
)

__all__ = [
    "BUCKET_LABELS",
    "CHART_AXIS_ORDER",
    "CatalogEntry",
    "CatalogError",
    "EmptyCatalogError",
    "InvalidFormatError",
    "RawScoreVector",
    "StandFinderError",
    "StatAxis",
    "TraitLevels",
    "bucket_label",
]
