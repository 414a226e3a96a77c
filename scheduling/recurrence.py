from __future__ import annotations
from datetime import date

from .values import WindowRule


def applies(window: WindowRule, on: date) -> bool:
    """Does the weekly rule apply on the given calendar date? Both validity bounds are inclusive."""
    if not window.is_active:
        return False
    if on < window.starts_on:
        return False
    if window.until is not None and on > window.until:
        return False
    return on.weekday() in window.repeat_on
