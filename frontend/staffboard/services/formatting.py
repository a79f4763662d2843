"""Formatting helpers for employee values shown on the board."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from staffboard.services.view_pipeline import parse_date


def format_number(value: float | None) -> str:
    """Return a grouped number with two decimals, e.g. ``75,000.00``."""
    return f"{(value or 0.0):,.2f}"


def format_currency(value: float | None) -> str:
    """Return whole US dollars, e.g. ``$70,000``."""
    amount = int(Decimal(str(value or 0.0)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if amount < 0:
        return f"-${-amount:,}"
    return f"${amount:,}"


def format_date(value: str | None) -> str:
    """Return ``Mar 1, 2024`` for ISO dates and the raw text otherwise."""
    parsed = parse_date(value)
    if parsed is None:
        return value or ""
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
