"""Helpers for building paint sequences."""

from typing import Optional

from ..models import BreakPaint, IconPaint, TextPaint, ParamValue

WHITE = "#ffffff"

BREAK = BreakPaint()


def icon(
    value: str,
    color: str = WHITE,
    scale: float = 1.0,
    rotation: int = 0,
    background: Optional[IconPaint] = None,
) -> IconPaint:
    """Atlas icon."""
    return IconPaint(
        value=value, color=color, scale=scale, rotation=rotation, background=background
    )


def text(value: str, color: str = WHITE) -> TextPaint:
    """Text label."""
    return TextPaint(value=value, color=color)


def progress(amount: ParamValue, current: ParamValue = 0) -> TextPaint:
    """Progress counter, e.g. ``[0/5]``."""
    return text(f"[{current}/{amount}]")
