"""Catalog of textbooks offered on the invoice form.

The catalog is read-only for the lifetime of the process: it is built once
from a static resource and only ever queried afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from facture.domain.exceptions import ValidationError
from facture.domain.model.value_objects import Money


@dataclass(frozen=True)
class CatalogItem:
    """A textbook that can be put on an invoice line."""

    id: str
    title: str
    unit_price: Money

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Catalog item id is required")
        if not self.title or not self.title.strip():
            raise ValidationError(f"Catalog item '{self.id}' has no title")


class Catalog:
    """Immutable lookup table of catalog items keyed by id.

    Iteration and ``items()`` keep the declaration order, which is also the
    order the presentation layer lists choices in.
    """

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        by_id: dict[str, CatalogItem] = {}
        for item in items:
            if item.id in by_id:
                raise ValidationError(f"Duplicate catalog item id '{item.id}'")
            by_id[item.id] = item
        self._by_id = by_id

    def lookup(self, item_id: str) -> CatalogItem | None:
        """Return the item for *item_id*, or None when it is not in the catalog."""
        if not item_id:
            return None
        return self._by_id.get(item_id)

    def items(self) -> list[CatalogItem]:
        return list(self._by_id.values())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} items)"
