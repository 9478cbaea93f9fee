"""Line requests coming in from the CLI and form views going back out.

Prices in the views are already formatted, so the CLI prints them as is.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineSpec:
    """Input: what the user asked for (catalog item id + quantity)."""

    item_id: str
    quantity: int


@dataclass(frozen=True)
class FormLineDTO:
    """Output: a single form line as displayed to the user."""

    number: int  # 1-based, as shown on screen
    item_id: str
    title: str
    quantity: int
    unit_price: str  # formatted, e.g. "1100 FCFA"
    line_total: str


@dataclass(frozen=True)
class FormDTO:
    """Output: the whole form with its running total."""

    client_name: str
    lines: list[FormLineDTO]
    total: str
