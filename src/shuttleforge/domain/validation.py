"""Job validator — leg structure, leg spacing, and driver assignment.

Two independent passes over the batch:

1. Structural: leg count, A/B labeling, and minimum spacing between legs.
2. Driver presence: every leg without a driver gets a warning, whatever
   the structural verdict for its job.

A bad record never hides problems in the rest of the batch: each job is
checked on its own and nothing here raises for a representable job.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shuttleforge.domain.calendar import days_between
from shuttleforge.domain.models import Issue, Job
from shuttleforge.domain.types import LegLabel, Severity

logger = logging.getLogger(__name__)

CODE_NO_LEGS = "no_legs"
CODE_LEG_ORDER = "leg_order"
CODE_LEG_SPACING = "leg_spacing"
CODE_TOO_MANY_LEGS = "too_many_legs"
CODE_MISSING_DRIVER = "missing_driver"

MAX_LEGS = 2


def validate_jobs(jobs: Iterable[Job], *, min_leg_gap_days: int = 1) -> list[Issue]:
    """Return structural errors followed by driver-assignment warnings."""
    batch = list(jobs)
    issues: list[Issue] = []
    for job in batch:
        issues.extend(check_structure(job, min_leg_gap_days=min_leg_gap_days))
    for job in batch:
        issues.extend(check_drivers(job))
    logger.debug("Validated %d jobs: %d issues", len(batch), len(issues))
    return issues


def check_structure(job: Job, *, min_leg_gap_days: int = 1) -> list[Issue]:
    """Leg count, ordering, and spacing checks for a single job."""
    legs = job.legs
    if not legs:
        return [_error(job, CODE_NO_LEGS, "must have at least one leg")]

    if len(legs) == 1:
        return []

    if len(legs) > MAX_LEGS:
        return [_error(job, CODE_TOO_MANY_LEGS, f"too many legs ({len(legs)})")]

    issues: list[Issue] = []
    first, second = legs
    if first.label != LegLabel.A or second.label != LegLabel.B:
        issues.append(_error(job, CODE_LEG_ORDER, "legs must be in order A then B"))
    if days_between(first.date, second.date) < min_leg_gap_days:
        issues.append(
            _error(
                job,
                CODE_LEG_SPACING,
                "Leg B must be at least the next day after Leg A",
            )
        )
    return issues


def check_drivers(job: Job) -> list[Issue]:
    """One warning per leg lacking an assigned driver. Never an error."""
    return [
        Issue(
            severity=Severity.WARNING,
            code=CODE_MISSING_DRIVER,
            job_id=job.id,
            date=leg.date,
            message=f"Job {job.id}: missing driver assignment on Leg {leg.display_label}",
        )
        for leg in job.legs
        if not leg.driver_id
    ]


def _error(job: Job, code: str, detail: str) -> Issue:
    return Issue(
        severity=Severity.ERROR,
        code=code,
        job_id=job.id,
        message=f"Job {job.id}: {detail}",
    )
