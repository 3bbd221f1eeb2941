"""Urgency tiers for leg dates.

``days_until`` is the leg date minus the reference (today) date. The same
classification drives every view so a leg never shows two urgencies.
"""

from __future__ import annotations

from shuttleforge.domain.types import Urgency

SOON_THRESHOLD_DAYS = 3


def classify_urgency(days_until: int, *, soon_threshold: int = SOON_THRESHOLD_DAYS) -> Urgency:
    """Map a signed day count to ``due`` (<= 0), ``soon`` (1..3), or ``clear``."""
    if days_until <= 0:
        return Urgency.DUE
    if days_until <= soon_threshold:
        return Urgency.SOON
    return Urgency.CLEAR


def urgency_label(days_until: int) -> str:
    """Pill text for a leg: ``Due`` on or past the date, else ``<n>d``."""
    if days_until <= 0:
        return "Due"
    return f"{days_until}d"
