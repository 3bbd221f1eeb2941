"""Move validator — pre-commit check for dragging a leg to a new date.

Rules, first match wins:

1. B-leg: the car must reach the take-out at least one full day before the
   trip ends. A new date later than ``trip_take_out - 1`` is rejected.
2. A-leg currently on launch day (``trip_put_in``) moving off it: accepted,
   with an advisory to confirm pickup with the trip owner.
3. Anything else: accepted cleanly.

The validator never touches the job. Callers apply the change themselves
and re-run the full evaluation, since a legal move can still break leg
spacing or capacity.
"""

from __future__ import annotations

import logging

from shuttleforge.domain.calendar import add_days, days_between
from shuttleforge.domain.models import MoveDecision, MoveRequest
from shuttleforge.domain.rules import DEFAULT_RULES, DispatchRules
from shuttleforge.domain.types import LegLabel, MoveOutcome

logger = logging.getLogger(__name__)


def decide_move(request: MoveRequest, rules: DispatchRules = DEFAULT_RULES) -> MoveDecision:
    """Evaluate a :class:`MoveRequest`.

    Raises:
        IndexError: If the request addresses a leg the job does not have.
    """
    job = request.job
    leg = request.leg
    new_date = request.new_date

    if leg.label == LegLabel.B and rules.enforce_takeout_rule and job.trip_take_out:
        if days_between(new_date, job.trip_take_out) < rules.takeout_lead_days:
            latest = add_days(job.trip_take_out, -rules.takeout_lead_days)
            logger.debug("Rejected move of %s leg B to %s", job.id, new_date)
            return MoveDecision(
                outcome=MoveOutcome.REJECTED,
                message=(
                    f"Leg B for job {job.id} must reach the take-out by "
                    f"{latest.isoformat()} (trip ends {job.trip_take_out.isoformat()}); "
                    f"cannot move it to {new_date.isoformat()}"
                ),
            )

    if (
        leg.label == LegLabel.A
        and rules.warn_launch_day_move
        and job.trip_put_in is not None
        and leg.date == job.trip_put_in
        and new_date != job.trip_put_in
    ):
        return MoveDecision(
            outcome=MoveOutcome.ACCEPTED_WITH_WARNING,
            message=(
                f"Leg A for job {job.id} is leaving launch day "
                f"{job.trip_put_in.isoformat()}: contact the trip owner to confirm "
                f"pickup can happen on {new_date.isoformat()} instead"
            ),
        )

    return MoveDecision(outcome=MoveOutcome.ACCEPTED)
