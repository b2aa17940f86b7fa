"""Builders shared by the Stand Finder tests."""

from typing import Optional, Sequence

from standfinder.core.models import CatalogEntry, TraitLevels

EXAMPLE_URL = (
    "https://charts.example.com/graphic/autism-spectrum?1&p=100,100,50,50,50,100,100,50,50,50&l=EN"
)
EXAMPLE_SCORES = (100, 100, 50, 50, 50, 100, 100, 50, 50, 50)


def build_url(
    scores: Sequence[int],
    *,
    scheme: Optional[str] = "https://",
    host: str = "charts.idrlabs.com",
    flag: Optional[int] = None,
    locale: Optional[str] = None,
    locale_first: bool = False,
) -> str:
    """Build a chart URL with the optional components placed as requested."""
    query = "" if flag is None else str(flag)
    score_param = "&p=" + ",".join(str(s) for s in scores)
    locale_param = "" if locale is None else f"&l={locale}"
    if locale_first:
        query += locale_param + score_param
    else:
        query += score_param + locale_param
    return f"{scheme or ''}{host}/graphic/autism-spectrum?{query}"


def make_levels(power=0, speed=0, range_=0, durability=0, precision=0, potential=0) -> TraitLevels:
    return TraitLevels(
        power=power,
        speed=speed,
        range=range_,
        durability=durability,
        precision=precision,
        potential=potential,
    )


def make_entry(name: str, *values: int) -> CatalogEntry:
    """Catalog entry from (power, speed, range, durability, precision, potential)."""
    return CatalogEntry(name=name, levels=make_levels(*values))


def stand_record(name: str, *values: int) -> dict:
    """Flat catalog record, as stored in the catalog JSON file."""
    keys = ("power", "speed", "range", "durability", "precision", "potential")
    return {"name": name, **dict(zip(keys, values))}
