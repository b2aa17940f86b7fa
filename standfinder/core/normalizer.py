"""Map ten raw scores onto six bucketed trait levels.

Each trait blends two raw scores (1:1 or 2:1) and rescales the nominal
maximum (200 or 300) onto buckets 0-5 by flooring. Integer arithmetic is
used throughout so the result is the exact floor of the real quotient.
"""

from __future__ import annotations

from collections.abc import Sequence

from standfinder.core.models import RawScoreVector, TraitLevels

# Number of bucket steps below the top of the nominal range
BUCKET_STEPS = 5


def _bucket(weighted_sum: int, nominal_max: int) -> int:
    """floor(weighted_sum / nominal_max * 5) without float rounding."""
    return weighted_sum * BUCKET_STEPS // nominal_max


def normalize(raw: RawScoreVector | Sequence[int]) -> TraitLevels:
    """Convert a raw score vector into trait levels.

    Args:
        raw: Ten raw scores. Plain sequences are validated into a
            RawScoreVector first.

    Returns:
        TraitLevels. Values are not clamped, so extreme inputs can yield
        levels above 5.

    Raises:
        ValueError: If ``raw`` is not a valid ten-score vector.
    """
    if not isinstance(raw, RawScoreVector):
        raw = RawScoreVector(raw)

    return TraitLevels(
        power=_bucket(raw[0] + raw[1], 200),
        speed=_bucket(raw[2] * 2 + raw[3], 300),
        range=_bucket(raw[3] + raw[4] * 2, 300),
        durability=_bucket(raw[5] + raw[6], 200),
        precision=_bucket(raw[7] * 2 + raw[8], 300),
        potential=_bucket(raw[8] + raw[9] * 2, 300),
    )
