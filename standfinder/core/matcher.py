"""Nearest-neighbour lookup of a stand by trait levels.

Distance is the unweighted squared Euclidean distance over the six
traits. The catalog is small and the lookup runs once per submission, so
a linear scan is all that is needed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from standfinder.core.errors import EmptyCatalogError
from standfinder.core.models import CatalogEntry, StatAxis, TraitLevels

logger = logging.getLogger(__name__)


def distance(a: TraitLevels, b: TraitLevels) -> int:
    """Squared Euclidean distance between two level records."""
    return sum((a.get(axis) - b.get(axis)) ** 2 for axis in StatAxis)


def match(levels: TraitLevels, catalog: Sequence[CatalogEntry]) -> CatalogEntry:
    """Return the catalog entry closest to ``levels``.

    On equal distance the entry that comes first in the catalog wins.

    Raises:
        EmptyCatalogError: If the catalog has no entries.
    """
    best: CatalogEntry | None = None
    best_distance = 0
    for entry in catalog:
        d = distance(entry.levels, levels)
        # strict <: an equal score never replaces the incumbent
        if best is None or d < best_distance:
            best, best_distance = entry, d

    if best is None:
        raise EmptyCatalogError(
            "Cannot match against an empty catalog",
            user_message="Stand catalog is empty",
        )

    logger.debug("Matched %s at distance %d for %s", best.name, best_distance, levels)
    return best


def rank(
    levels: TraitLevels,
    catalog: Sequence[CatalogEntry],
    limit: int | None = None,
) -> list[tuple[CatalogEntry, int]]:
    """All catalog entries with their distance, closest first.

    Ties keep catalog order, so ``rank(...)[0][0]`` is ``match(...)``.

    Raises:
        EmptyCatalogError: If the catalog has no entries.
    """
    if not catalog:
        raise EmptyCatalogError(
            "Cannot rank against an empty catalog",
            user_message="Stand catalog is empty",
        )
    # sorted() is stable
    ranked = sorted(((entry, distance(entry.levels, levels)) for entry in catalog), key=lambda pair: pair[1])
    return ranked if limit is None else ranked[:limit]
