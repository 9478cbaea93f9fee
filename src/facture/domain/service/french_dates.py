"""Long-form French dates.

The output is the same whatever locale the host is configured with.
"""

from __future__ import annotations

from datetime import date

WEEKDAYS = (
    "lundi",
    "mardi",
    "mercredi",
    "jeudi",
    "vendredi",
    "samedi",
    "dimanche",
)

MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)


def format_long_date(day: date) -> str:
    """Format *day* as e.g. ``samedi 17 octobre 2026``.

    Accepts ``datetime`` too; the time part is ignored.
    """
    weekday = WEEKDAYS[day.weekday()]
    month = MONTHS[day.month - 1]
    return f"{weekday} {day.day} {month} {day.year}"
