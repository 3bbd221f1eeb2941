"""Classification enums shared across the engine."""

from __future__ import annotations

from enum import StrEnum


class DriverRole(StrEnum):
    """Roster roles. Shuttle drivers move cars, van crews ferry drivers back."""

    SHUTTLE = "shuttle"
    VAN = "van"


class LegLabel(StrEnum):
    """Leg labels for two-leg jobs. Single-leg jobs may leave the label unset."""

    A = "A"
    B = "B"


class Severity(StrEnum):
    """Issue severity. Errors block export/commit; warnings are advisory."""

    ERROR = "error"
    WARNING = "warning"


class Urgency(StrEnum):
    """Scheduling urgency tiers for a leg date relative to today."""

    DUE = "due"
    SOON = "soon"
    CLEAR = "clear"


class MoveOutcome(StrEnum):
    """Result of validating a proposed reschedule."""

    ACCEPTED = "accepted"
    ACCEPTED_WITH_WARNING = "accepted_with_warning"
    REJECTED = "rejected"


# Ordering used by severity filters (lower = less severe).
SEVERITY_RANK: dict[str, int] = {
    "warning": 0,
    "error": 1,
}
