"""JSON-file-backed catalog loader.

The catalog ships as a static resource next to this module; it is read,
never written.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from facture.domain.exceptions import CatalogFormatError, DomainException
from facture.domain.model.catalog import Catalog, CatalogItem
from facture.domain.model.value_objects import DEFAULT_CURRENCY, Money
from facture.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("catalog.json")


def load_catalog(file_path: Path = DEFAULT_CATALOG_PATH) -> Catalog:
    """Read a catalog file: a JSON list of ``{"id", "title", "price"}`` objects."""
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogFormatError(f"Cannot read catalog {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogFormatError(f"Catalog {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise CatalogFormatError(f"Catalog {file_path} must hold a JSON list")

    try:
        catalog = Catalog(_to_item(entry) for entry in raw)
    except CatalogFormatError:
        raise
    except DomainException as exc:
        raise CatalogFormatError(f"Invalid catalog {file_path}: {exc}") from exc

    logger.debug("Loaded %d catalog items from %s", len(catalog), file_path)
    return catalog


# --- Serialization helpers ----------------------------------------------------


def _to_item(entry: Any) -> CatalogItem:
    if not isinstance(entry, dict):
        raise CatalogFormatError(f"Catalog entry must be an object, got {entry!r}")
    missing = [key for key in ("id", "title", "price") if key not in entry]
    if missing:
        raise CatalogFormatError(
            f"Catalog entry {entry!r} is missing {', '.join(missing)}"
        )
    price = entry["price"]
    if not isinstance(price, int) or isinstance(price, bool):
        raise CatalogFormatError(
            f"Price of '{entry['id']}' must be a whole number, got {price!r}"
        )
    if "currency" in entry:
        # invoice totals are always printed in DEFAULT_CURRENCY
        raise CatalogFormatError(
            f"Catalog prices are in {DEFAULT_CURRENCY}; "
            f"entry '{entry['id']}' sets currency {entry['currency']!r}"
        )
    return CatalogItem(
        id=str(entry["id"]),
        title=str(entry["title"]),
        unit_price=Money(price),
    )
