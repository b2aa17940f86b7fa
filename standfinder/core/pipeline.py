"""URL in, stand out: the parse -> normalize -> match chain."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from standfinder.core.matcher import distance, match, rank
from standfinder.core.models import CatalogEntry, TraitLevels
from standfinder.core.normalizer import normalize
from standfinder.core.url_parser import ChartUrl, parse_chart_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandResult:
    """Outcome of one submission.

    Attributes:
        url: Parsed chart URL.
        levels: The user's normalized trait levels.
        stand: Closest catalog entry.
        distance: Squared distance between ``levels`` and the stand.
        runner_up: Second-closest catalog entry (None for a one-entry catalog).
        runner_up_distance: Squared distance to ``runner_up``.
    """

    url: ChartUrl
    levels: TraitLevels
    stand: CatalogEntry
    distance: int
    runner_up: CatalogEntry | None = None
    runner_up_distance: int | None = None

    @property
    def headline(self) -> str:
        return f"Your stand is {self.stand.name}"

    @property
    def summary(self) -> str:
        """One-line status text: closest stand and, if any, the runner-up."""
        text = f"Closest stand: {self.stand.name} (distance {self.distance})"
        if self.runner_up is not None:
            text += f", runner-up: {self.runner_up.name} (distance {self.runner_up_distance})"
        return text

    def to_dict(self) -> dict[str, Any]:
        return {
            "stand": self.stand.name,
            "stand_levels": self.stand.levels.as_dict(),
            "stand_labels": self.stand.levels.labels(),
            "user_levels": self.levels.as_dict(),
            "raw_scores": list(self.url.scores),
            "locale": self.url.locale,
            "distance": self.distance,
            "runner_up": self.runner_up.name if self.runner_up is not None else None,
            "runner_up_distance": self.runner_up_distance,
        }


def find_stand(url: str, catalog: Sequence[CatalogEntry]) -> StandResult:
    """Run the full pipeline for one chart URL.

    Raises:
        InvalidFormatError: If the URL is malformed (nothing else runs).
        EmptyCatalogError: If the catalog is empty.
    """
    chart_url = parse_chart_url(url)
    levels = normalize(chart_url.scores)
    stand = match(levels, catalog)
    runner_up, runner_up_distance = None, None
    # rank() keeps catalog order on ties, so its first entry is the match
    ranked = rank(levels, catalog, limit=2)
    if len(ranked) > 1:
        runner_up, runner_up_distance = ranked[1]

    result = StandResult(
        url=chart_url,
        levels=levels,
        stand=stand,
        distance=distance(stand.levels, levels),
        runner_up=runner_up,
        runner_up_distance=runner_up_distance,
    )
    logger.info("Scores %s -> %s (distance %d)", list(chart_url.scores), stand.name, result.distance)
    if runner_up is not None:
        logger.debug("Runner-up %s (distance %d)", runner_up.name, runner_up_distance)
    return result
