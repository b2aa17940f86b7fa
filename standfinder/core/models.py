"""Value types shared by the parser, normalizer, matcher and renderer.

Kept free of any GUI import so the whole pipeline runs headless.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# =============================================================================
# Constants
# =============================================================================

RAW_SCORE_COUNT = 10
RAW_SCORE_MAX = 999

# Bucket value -> display label
BUCKET_LABELS: tuple[str, ...] = ("E", "D", "C", "B", "A", "Infinite")
MIN_LEVEL = 0
MAX_LEVEL = len(BUCKET_LABELS) - 1


class StatAxis(StrEnum):
    """The six trait dimensions shared by queries and catalog entries."""

    POWER = "power"
    SPEED = "speed"
    RANGE = "range"
    DURABILITY = "durability"
    PRECISION = "precision"
    POTENTIAL = "potential"


# Chart axis i is drawn at i * 60 degrees
CHART_AXIS_ORDER: tuple[StatAxis, ...] = (
    StatAxis.SPEED,
    StatAxis.RANGE,
    StatAxis.DURABILITY,
    StatAxis.PRECISION,
    StatAxis.POTENTIAL,
    StatAxis.POWER,
)


def clamp_level(level: int) -> int:
    """Clamp a bucket value into the labelled range [0, 5]."""
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def bucket_label(level: int) -> str:
    """Return the label for a bucket value ("E" .. "Infinite").

    Values outside [0, 5] are clamped, so a normalizer result above the
    nominal maximum still reads as "Infinite".
    """
    return BUCKET_LABELS[clamp_level(level)]


# =============================================================================
# RawScoreVector
# =============================================================================


class RawScoreVector(tuple):
    """Exactly ten raw test scores in source order, each in [0, 999].

    A tuple subclass, so it compares equal to a plain tuple with the same
    values and cannot be mutated after construction.
    """

    __slots__ = ()

    def __new__(cls, values: Iterable[int]) -> RawScoreVector:
        items = tuple(values)
        if len(items) != RAW_SCORE_COUNT:
            raise ValueError(f"Expected {RAW_SCORE_COUNT} raw scores, got {len(items)}")
        for i, value in enumerate(items):
            # bool is an int subclass but never a valid score
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Raw score {i} is not an int: {value!r}")
            if not 0 <= value <= RAW_SCORE_MAX:
                raise ValueError(f"Raw score {i} out of range [0, {RAW_SCORE_MAX}]: {value}")
        return super().__new__(cls, items)

    def __repr__(self) -> str:
        return f"RawScoreVector({list(self)!r})"


# =============================================================================
# TraitLevels
# =============================================================================


@dataclass(frozen=True)
class TraitLevels:
    """Six bucketed trait levels.

    Attributes are expected in [0, 5] but are not clamped: a raw vector far
    above the nominal maxima normalizes to larger values, and the matcher
    works with those as-is.
    """

    power: int
    speed: int
    range: int
    durability: int
    precision: int
    potential: int

    def get(self, axis: StatAxis | str) -> int:
        """Level for one axis, by enum member or plain name."""
        return int(getattr(self, StatAxis(axis).value))

    def as_dict(self) -> dict[str, int]:
        return {axis.value: self.get(axis) for axis in StatAxis}

    def labels(self) -> dict[str, str]:
        """Display label per axis, e.g. {"power": "A", ...}."""
        return {axis.value: bucket_label(self.get(axis)) for axis in StatAxis}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TraitLevels:
        """Build from a mapping holding all six axis names.

        Raises:
            KeyError: If an axis is missing.
            ValueError: If a value is not an int.
        """
        values: dict[str, int] = {}
        for axis in StatAxis:
            value = data[axis.value]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Level {axis.value!r} is not an int: {value!r}")
            values[axis.value] = value
        return cls(**values)


# =============================================================================
# CatalogEntry
# =============================================================================


@dataclass(frozen=True)
class CatalogEntry:
    """A named reference entry (a stand) with its six trait levels."""

    name: str
    levels: TraitLevels

    def to_dict(self) -> dict[str, Any]:
        """Flat record, same shape as the bundled catalog file."""
        return {"name": self.name, **self.levels.as_dict()}
