"""DispatchService — schedule evaluation and move validation for callers.

Wraps the pure engine (:mod:`shuttleforge.domain.engine`) in the
ServiceResult contract and adds the caller-facing projections the engine
leaves out: issue counts, the overbooked-day list, the export gate, and
per-leg urgency against a reference date.
"""

from __future__ import annotations

import datetime
from pathlib import Path
from typing import Any

import structlog

from shuttleforge.domain.calendar import days_between
from shuttleforge.domain.engine import evaluate, validate_move
from shuttleforge.domain.models import Evaluation, Job
from shuttleforge.domain.types import SEVERITY_RANK
from shuttleforge.domain.urgency import classify_urgency, urgency_label
from shuttleforge.infrastructure.snapshot import Snapshot
from shuttleforge.services._helpers import today_utc
from shuttleforge.services.base import BaseService
from shuttleforge.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class DispatchService(BaseService):
    """Evaluates route snapshots and proposed leg moves."""

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(
        self,
        snapshot: Snapshot,
        *,
        today: datetime.date | None = None,
        min_severity: str = "warning",
    ) -> ServiceResult:
        """Run the full evaluation over *snapshot*.

        The result is ``ok`` even when errors were found: the report itself
        succeeded. ``data["export_blocked"]`` is the commit/export gate and
        is computed from every issue, regardless of *min_severity*.
        """
        reference = today or snapshot.today or today_utc()
        evaluation = evaluate(snapshot.jobs, snapshot.drivers, self._rules)

        threshold = SEVERITY_RANK.get(min_severity, 0)
        shown = [i for i in evaluation.issues if SEVERITY_RANK[i.severity] >= threshold]

        data: dict[str, Any] = {
            "issues": [issue.model_dump(mode="json") for issue in shown],
            "count": len(shown),
            "error_count": len(evaluation.errors),
            "warning_count": len(evaluation.warnings),
            "export_blocked": evaluation.export_blocked,
            "capacity": _capacity_rows(evaluation),
            "overbooked_days": [day.isoformat() for day in evaluation.overbooked_days],
            "legs": self._leg_rows(snapshot.jobs, reference),
            "jobs": len(snapshot.jobs),
        }
        log.info(
            "evaluate.complete",
            route=snapshot.route,
            jobs=len(snapshot.jobs),
            errors=data["error_count"],
            warnings=data["warning_count"],
            overbooked=len(data["overbooked_days"]),
        )
        return ServiceResult(
            ok=True,
            op="evaluate",
            data=data,
            meta={"route": snapshot.route, "today": reference.isoformat()},
        )

    def evaluate_file(
        self,
        path: Path,
        *,
        today: datetime.date | None = None,
        min_severity: str = "warning",
    ) -> ServiceResult:
        loaded = self._load(path, op="evaluate")
        if isinstance(loaded, ServiceResult):
            return loaded
        return self.evaluate(loaded, today=today, min_severity=min_severity)

    # ------------------------------------------------------------------
    # Move validation
    # ------------------------------------------------------------------

    def validate_move(
        self,
        snapshot: Snapshot,
        job_id: str,
        leg: str | int,
        new_date: datetime.date,
    ) -> ServiceResult:
        """Check a proposed reschedule without applying it.

        *leg* is a label (``"A"``/``"B"``) or a 0-based leg index.
        """
        op = "validate_move"
        job = snapshot.find_job(job_id)
        if job is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="JOB_NOT_FOUND",
                    message=f"No job with id {job_id!r} in snapshot",
                    detail={"job_id": job_id},
                ),
            )

        leg_index = resolve_leg_index(job, leg)
        if leg_index is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_LEG",
                    message=f"Job {job_id} has no leg {leg!r}",
                    detail={"job_id": job_id, "leg": str(leg), "legs": len(job.legs)},
                ),
            )

        decision = validate_move(job, leg_index, new_date, self._rules)
        current = job.legs[leg_index]
        data: dict[str, Any] = {
            "job_id": job.id,
            "job_number": job.number,
            "leg": current.display_label,
            "leg_index": leg_index,
            "from": current.date.isoformat(),
            "to": new_date.isoformat(),
            "outcome": str(decision.outcome),
            "message": decision.message,
        }
        log.info("move.decided", job_id=job.id, leg=data["leg"], outcome=data["outcome"])

        if not decision.accepted:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code="MOVE_REJECTED",
                    message=decision.message or "Move rejected",
                    detail=data,
                ),
            )
        warnings = [decision.message] if decision.has_warning and decision.message else []
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def validate_move_file(
        self,
        path: Path,
        job_id: str,
        leg: str | int,
        new_date: datetime.date,
    ) -> ServiceResult:
        loaded = self._load(path, op="validate_move")
        if isinstance(loaded, ServiceResult):
            return loaded
        return self.validate_move(loaded, job_id, leg, new_date)

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def _leg_rows(self, jobs: tuple[Job, ...], today: datetime.date) -> list[dict[str, Any]]:
        """Per-leg urgency rows, ordered by leg date then job id."""
        rows: list[dict[str, Any]] = []
        for job in jobs:
            for leg in job.legs:
                days_until = days_between(today, leg.date)
                urgency = classify_urgency(
                    days_until,
                    soon_threshold=self._rules.soon_threshold_days,
                )
                rows.append(
                    {
                        "job_id": job.id,
                        "job_number": job.number,
                        "leg": leg.display_label if len(job.legs) > 1 else "route",
                        "date": leg.date.isoformat(),
                        "days_until": days_until,
                        "urgency": str(urgency),
                        "label": urgency_label(days_until),
                        "driver_id": leg.driver_id,
                        "start_location": leg.start_location,
                        "end_location": leg.end_location,
                    }
                )
        rows.sort(key=lambda r: (r["date"], r["job_id"]))
        return rows


def resolve_leg_index(job: Job, leg: str | int) -> int | None:
    """Map a leg label or index to a valid index into ``job.legs``."""
    if isinstance(leg, str):
        token = leg.strip()
        if token.isdigit():
            leg = int(token)
        else:
            wanted = token.upper()
            for idx, candidate in enumerate(job.legs):
                if candidate.label is not None and str(candidate.label) == wanted:
                    return idx
            return None
    if 0 <= leg < len(job.legs):
        return leg
    return None


def _capacity_rows(evaluation: Evaluation) -> list[dict[str, Any]]:
    return [
        {
            "date": day.isoformat(),
            "cars": cap.cars,
            "shuttle_on_duty": cap.shuttle_on_duty,
            "overbooked": cap.overbooked,
        }
        for day, cap in evaluation.capacity.items()
    ]
