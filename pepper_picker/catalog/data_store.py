from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Item

logger = logging.getLogger(__name__)

LIST_COLUMNS = ("best_uses", "cuisine_affinity", "prep_best", "color_stages")
BOOL_COLUMNS = (
    "container_friendly",
    "indoor_suitable",
    "greenhouse_recommended",
    "available_from_seedsnow",
    "available_from_west_coast_seeds",
)
_TRUE_VALUES = {"true", "yes", "1"}

_items: list[Item] | None = None


class CatalogError(ValueError):
    """Raised when a catalog record does not conform to the Item schema."""


def _split(value: Any, separator: str) -> list[str]:
    if pd.isna(value):
        return []
    return [part.strip() for part in str(value).split(separator) if part.strip()]


def _to_bool(value: Any) -> bool:
    if pd.isna(value):
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _row_to_record(row: pd.Series, separator: str) -> dict[str, Any]:
    record: dict[str, Any] = {}
    for column, value in row.items():
        if column in LIST_COLUMNS:
            record[column] = _split(value, separator)
        elif column in BOOL_COLUMNS:
            record[column] = _to_bool(value)
        elif pd.isna(value):
            # Missing optional values fall back to the model defaults
            continue
        elif column == "min_pot_liters":
            record[column] = int(value)
        else:
            # numpy scalars to native python values
            record[column] = value.item() if hasattr(value, "item") else value
    return record


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Item]:
    """
    Read the catalog CSV and validate every row into an immutable Item.

    Rows are kept in file order. A row that fails validation aborts the load
    with a CatalogError naming the offending record.
    """
    df = pd.read_csv(Path(config.catalog_path), dtype={"alternate_names": str})
    df.columns = [c.strip() for c in df.columns]

    items: list[Item] = []
    for position, row in df.iterrows():
        record = _row_to_record(row, config.list_separator)
        try:
            items.append(Item.model_validate(record))
        except ValidationError as exc:
            label = record.get("name") or f"row {position}"
            logger.error("Rejecting catalog record %s (id=%s)", label, record.get("id"))
            raise CatalogError(f"Invalid catalog record {label!r} (id={record.get('id')}): {exc}") from exc

    ids = [item.id for item in items]
    if len(ids) != len(set(ids)):
        raise CatalogError("Catalog item ids must be unique")

    logger.info("Loaded %d catalog items from %s", len(items), config.catalog_path)
    return items


def get_catalog() -> list[Item]:
    """Return the in-memory catalog, loading it on first call."""
    global _items
    if _items is None:
        _items = load_catalog()
    return _items


def get_item(item_id: int) -> Item | None:
    for item in get_catalog():
        if item.id == item_id:
            return item
    return None
