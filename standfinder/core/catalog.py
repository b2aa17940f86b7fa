"""Stand catalog loading and validation.

The catalog is a JSON list of flat records::

    [{"name": "Star Platinum", "power": 4, "speed": 4, "range": 2,
      "durability": 4, "precision": 4, "potential": 4}, ...]

It is read once, validated, and handed to the matcher as an immutable
tuple. Catalog order matters: the matcher keeps the first entry on ties.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from standfinder.core.errors import CatalogError
from standfinder.core.models import MAX_LEVEL, MIN_LEVEL, CatalogEntry, StatAxis, TraitLevels

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "stands.json"


def _entry_from_record(index: int, record: Any) -> CatalogEntry:
    if not isinstance(record, Mapping):
        raise CatalogError(
            f"Catalog record {index} is not an object",
            context={"index": index, "record": record},
        )

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"Catalog record {index} has no name", context={"index": index})

    missing = [axis.value for axis in StatAxis if axis.value not in record]
    if missing:
        raise CatalogError(
            f"Catalog record {index} ({name}) is missing {', '.join(missing)}",
            context={"index": index, "name": name, "missing": missing},
        )

    try:
        levels = TraitLevels.from_mapping(record)
    except ValueError as e:
        raise CatalogError(f"Catalog record {index} ({name}): {e}", context={"index": index, "name": name}) from e

    for axis, level in levels.as_dict().items():
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise CatalogError(
                f"Catalog record {index} ({name}) has {axis}={level}, expected {MIN_LEVEL}-{MAX_LEVEL}",
                context={"index": index, "name": name, "axis": axis, "level": level},
            )

    return CatalogEntry(name=name, levels=levels)


def catalog_from_records(records: Iterable[Any]) -> tuple[CatalogEntry, ...]:
    """Validate raw records and return them as catalog entries, order kept.

    Raises:
        CatalogError: On the first invalid record.
    """
    return tuple(_entry_from_record(i, record) for i, record in enumerate(records))


def load_catalog(path: str | Path | None = None) -> tuple[CatalogEntry, ...]:
    """Load a catalog file (the bundled stands list when ``path`` is None).

    The bundled catalog is parsed once per process and cached.

    Raises:
        CatalogError: If the file is missing, not JSON, not a list, or
            holds an invalid record.
    """
    if path is None or Path(path) == DEFAULT_CATALOG_PATH:
        return _load_default_catalog()
    return _read_catalog(Path(path))


@functools.lru_cache(maxsize=1)
def _load_default_catalog() -> tuple[CatalogEntry, ...]:
    return _read_catalog(DEFAULT_CATALOG_PATH)


def _read_catalog(path: Path) -> tuple[CatalogEntry, ...]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(
            f"Catalog file not found: {path}",
            user_message="Stand catalog is missing",
            context={"path": str(path)},
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(
            f"Could not read catalog {path}: {e}",
            user_message="Stand catalog is unreadable",
            context={"path": str(path)},
        ) from e

    if not isinstance(data, list):
        raise CatalogError(
            f"Catalog {path} must hold a JSON list, got {type(data).__name__}",
            context={"path": str(path)},
        )

    entries = catalog_from_records(data)
    logger.info("Loaded %d stands from %s", len(entries), path)
    return entries
