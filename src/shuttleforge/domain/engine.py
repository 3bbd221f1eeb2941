"""Engine entry points: :func:`evaluate` and :func:`validate_move`.

INVARIANT: Both are pure functions of their arguments. Re-running either on
the same snapshot yields an equal result, so independent snapshots can be
evaluated concurrently without coordination.
"""

from __future__ import annotations

from collections.abc import Iterable

from shuttleforge.domain.calendar import DateLike, parse_date
from shuttleforge.domain.capacity import aggregate_capacity
from shuttleforge.domain.models import Driver, Evaluation, Job, MoveDecision, MoveRequest
from shuttleforge.domain.moves import decide_move
from shuttleforge.domain.rules import DEFAULT_RULES, DispatchRules
from shuttleforge.domain.validation import validate_jobs


def evaluate(
    jobs: Iterable[Job],
    drivers: Iterable[Driver],
    rules: DispatchRules | None = None,
) -> Evaluation:
    """Structural, driver-assignment, and capacity evaluation of a snapshot."""
    rules = rules or DEFAULT_RULES
    batch = list(jobs)
    issues = validate_jobs(batch, min_leg_gap_days=rules.min_leg_gap_days)
    coverage_issues, capacity = aggregate_capacity(
        batch,
        drivers,
        require_van_coverage=rules.require_van_coverage,
    )
    issues.extend(coverage_issues)
    return Evaluation(issues=tuple(issues), capacity=capacity)


def validate_move(
    job: Job,
    leg_index: int,
    new_date: DateLike,
    rules: DispatchRules | None = None,
) -> MoveDecision:
    """Decide whether moving ``job.legs[leg_index]`` to *new_date* may commit."""
    request = MoveRequest(job=job, leg_index=leg_index, new_date=parse_date(new_date))
    return decide_move(request, rules or DEFAULT_RULES)
