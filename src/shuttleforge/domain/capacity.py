"""Capacity aggregator — cars per day against on-duty driver supply.

Counts raw legs per calendar date. A job never gets deduplicated: two legs
on the same date count twice (the validator already flags that job).

Driver on-duty status has no per-date calendar, so ``shuttle_on_duty`` is
the same roster-wide count for every date. The per-date shape is kept so a
date-aware roster can slot in without changing callers.
"""

from __future__ import annotations

import datetime
import logging
from collections import Counter
from collections.abc import Iterable

from shuttleforge.domain.models import DayCapacity, Driver, Issue, Job
from shuttleforge.domain.types import DriverRole, Severity

logger = logging.getLogger(__name__)

CODE_VAN_COVERAGE = "van_coverage"


def count_on_duty(drivers: Iterable[Driver], role: DriverRole) -> int:
    return sum(1 for d in drivers if d.role == role and d.on_duty)


def cars_by_date(jobs: Iterable[Job]) -> dict[datetime.date, int]:
    """Leg count per distinct leg date, ordered by date ascending."""
    counts: Counter[datetime.date] = Counter(leg.date for job in jobs for leg in job.legs)
    return {day: counts[day] for day in sorted(counts)}


def aggregate_capacity(
    jobs: Iterable[Job],
    drivers: Iterable[Driver],
    *,
    require_van_coverage: bool = True,
) -> tuple[list[Issue], dict[datetime.date, DayCapacity]]:
    """Build the per-day capacity table and van-coverage errors.

    Overbooking (``cars > shuttle_on_duty``) is not reported as an issue;
    callers read it off the returned table.
    """
    roster = list(drivers)
    shuttle_on_duty = count_on_duty(roster, DriverRole.SHUTTLE)
    has_any_van = count_on_duty(roster, DriverRole.VAN) > 0

    capacity = {
        day: DayCapacity(date=day, cars=cars, shuttle_on_duty=shuttle_on_duty)
        for day, cars in cars_by_date(jobs).items()
    }

    issues: list[Issue] = []
    if require_van_coverage and not has_any_van:
        for day, cap in capacity.items():
            if cap.cars > 0:
                issues.append(
                    Issue(
                        severity=Severity.ERROR,
                        code=CODE_VAN_COVERAGE,
                        date=day,
                        message=(
                            f"No van driver scheduled on {day.isoformat()} "
                            f"but {cap.cars} cars are moving"
                        ),
                    )
                )

    logger.debug(
        "Capacity over %d days: shuttle_on_duty=%d has_van=%s",
        len(capacity),
        shuttle_on_duty,
        has_any_van,
    )
    return issues, capacity
