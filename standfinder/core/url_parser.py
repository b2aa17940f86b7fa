"""Parse the raw scores out of a personality-test chart URL.

Accepted shape::

    [http[s]://]charts.<host>.com/graphic/autism-spectrum?[D][&l=XX]&p=N,N,N,N,N,N,N,N,N,N[&l=XX]

where ``D`` is an optional single-digit flag, ``XX`` a two-letter
uppercase locale (before and/or after ``p=``) and each ``N`` a
1-3 digit score. Anything else is rejected as a whole.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from standfinder.core.errors import InvalidFormatError
from standfinder.core.models import RAW_SCORE_COUNT, RawScoreVector

logger = logging.getLogger(__name__)

# Hosts serving the same chart path
CHART_HOSTS = ("charts.idrlabs.com", "charts.example.com")
CHART_PATH = "/graphic/autism-spectrum"

# Longest URL echoed back in error context
_MAX_URL_IN_CONTEXT = 200


def _build_pattern(hosts: tuple[str, ...]) -> re.Pattern[str]:
    host_alternatives = "|".join(re.escape(h) for h in hosts)
    scores = ",".join([r"(\d{1,3})"] * RAW_SCORE_COUNT)
    return re.compile(
        rf"""
        ^(?:https?://)?
        (?:{host_alternatives})
        {re.escape(CHART_PATH)}\?
        (?P<flag>\d)?
        (?:&l=(?P<locale_before>[A-Z]{{2}}))?
        &p={scores}
        (?:&l=(?P<locale_after>[A-Z]{{2}}))?$
        """,
        re.VERBOSE | re.ASCII,
    )


CHART_URL_PATTERN = _build_pattern(CHART_HOSTS)


@dataclass(frozen=True)
class ChartUrl:
    """Everything the chart URL carries.

    Attributes:
        scores: The ten raw scores in source order.
        flag: Optional single-digit flag right after ``?``.
        locale: Optional two-letter locale code (``l=`` parameter).
    """

    scores: RawScoreVector
    flag: int | None = None
    locale: str | None = None


def parse_chart_url(url: str, pattern: re.Pattern[str] = CHART_URL_PATTERN) -> ChartUrl:
    """Parse a chart URL into scores, flag and locale.

    Args:
        url: The chart URL. Surrounding whitespace is ignored.
        pattern: Compiled grammar (override for other hosts).

    Returns:
        ChartUrl with exactly ten scores.

    Raises:
        InvalidFormatError: If the URL does not match the grammar.
    """
    if not isinstance(url, str):
        raise InvalidFormatError(
            f"Chart URL must be a string, got {type(url).__name__}",
            user_message="Invalid URL",
        )

    candidate = url.strip()
    match = pattern.match(candidate)
    if match is None:
        logger.debug("Rejected chart URL: %r", candidate[:_MAX_URL_IN_CONTEXT])
        raise InvalidFormatError(
            f"Invalid chart URL: {candidate[:_MAX_URL_IN_CONTEXT]!r}",
            user_message="Invalid URL",
            context={"url": candidate[:_MAX_URL_IN_CONTEXT]},
        )

    scores = RawScoreVector(int(match.group(i)) for i in range(1, RAW_SCORE_COUNT + 1))
    flag = match.group("flag")
    # With l= on both sides of p=, the later one wins
    locale = match.group("locale_after") or match.group("locale_before")
    return ChartUrl(scores=scores, flag=int(flag) if flag is not None else None, locale=locale)


def parse(url: str) -> RawScoreVector:
    """Extract the ten raw scores from a chart URL.

    Raises:
        InvalidFormatError: If the URL does not match the grammar.
    """
    return parse_chart_url(url).scores
