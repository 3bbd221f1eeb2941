"""Snapshot entities and engine result values.

All models are frozen. The engine borrows them for a single evaluation and
returns new values; callers apply approved changes by building new models
(``job.model_copy(update=...)`` or :func:`reschedule_leg`).

Field names are snake_case but the camelCase keys used by the dispatch
front end (``tripPutIn``, ``driverId``, ``onDuty`` ...) are accepted too.
"""

from __future__ import annotations

import datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from shuttleforge.domain.calendar import format_mmddyy
from shuttleforge.domain.types import DriverRole, LegLabel, MoveOutcome, Severity

_RECORD_CONFIG = {
    "frozen": True,
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Car(BaseModel):
    """The customer's vehicle. Opaque to the engine beyond display."""

    model_config = _RECORD_CONFIG

    owner: str
    make_model: str = ""
    plate: str = ""
    notes: str | None = None


class Leg(BaseModel):
    """One directed transport segment on a single calendar date."""

    model_config = _RECORD_CONFIG

    # Free text: anything other than A or B is reported by the validator.
    label: str | None = Field(
        default=None,
        validation_alias=AliasChoices("label", "leg", "code"),
    )
    start_location: str = ""
    end_location: str = ""
    date: datetime.date
    depart: str = ""
    arrive: str = ""
    driver_id: str | None = None

    @field_validator("label", "driver_id", mode="before")
    @classmethod
    def _blank_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def display_label(self) -> str:
        return self.label or "?"


class Job(BaseModel):
    """One car's shuttle assignment: one or two legs plus the trip window."""

    model_config = _RECORD_CONFIG

    id: str
    car: Car | None = None
    legs: tuple[Leg, ...] = ()
    trip_put_in: datetime.date | None = None
    trip_take_out: datetime.date | None = None

    @property
    def number(self) -> str:
        """Display job number ``<owner>-<MM/DD/YY>``.

        Uses the B-leg date when the job has one, otherwise the first leg's
        date. Jobs without a car fall back to their id as the owner part.
        """
        owner = self.car.owner if self.car else self.id
        leg_b = next((leg for leg in self.legs if leg.label == LegLabel.B), None)
        if leg_b is not None:
            use_date: datetime.date | None = leg_b.date
        elif self.legs:
            use_date = self.legs[0].date
        else:
            use_date = None
        return f"{owner}-{format_mmddyy(use_date)}"


class Driver(BaseModel):
    """A roster entry. The roster is flat, not scoped per route."""

    model_config = _RECORD_CONFIG

    id: str
    name: str = ""
    role: DriverRole
    on_duty: bool = True

    @field_validator("role", mode="before")
    @classmethod
    def _lower_role(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Issue(BaseModel):
    """A validation finding. ``code`` is stable; ``message`` is for humans."""

    model_config = {"frozen": True}

    severity: Severity
    message: str
    code: str
    job_id: str | None = None
    date: datetime.date | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR


class DayCapacity(BaseModel):
    """Cars moving on a date against the shuttle drivers available for it."""

    model_config = {"frozen": True}

    date: datetime.date
    cars: int = 0
    shuttle_on_duty: int = 0

    @property
    def overbooked(self) -> bool:
        return self.cars > self.shuttle_on_duty


class Evaluation(BaseModel):
    """Full result of :func:`shuttleforge.domain.engine.evaluate`.

    Attributes:
        issues: Structural, driver-assignment and van-coverage findings.
        capacity: Per-date capacity, ordered by date ascending.
    """

    model_config = {"frozen": True}

    issues: tuple[Issue, ...] = ()
    capacity: dict[datetime.date, DayCapacity] = Field(default_factory=dict)

    @property
    def errors(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> list[Issue]:
        return [issue for issue in self.issues if not issue.is_error]

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    @property
    def export_blocked(self) -> bool:
        """Commit/export must stay disabled while any error is present."""
        return self.has_errors

    @property
    def overbooked_days(self) -> list[datetime.date]:
        return [day for day, cap in self.capacity.items() if cap.overbooked]


class MoveRequest(BaseModel):
    """A proposed reschedule of one leg of one job to a new date."""

    model_config = {"frozen": True}

    job: Job
    leg_index: int
    new_date: datetime.date

    @property
    def leg(self) -> Leg:
        """The leg being moved.

        Raises:
            IndexError: If ``leg_index`` does not address a leg of the job.
        """
        if not 0 <= self.leg_index < len(self.job.legs):
            msg = f"Job {self.job.id} has no leg at index {self.leg_index}"
            raise IndexError(msg)
        return self.job.legs[self.leg_index]

    @property
    def role(self) -> str | None:
        return self.leg.label


class MoveDecision(BaseModel):
    """Verdict on a :class:`MoveRequest`."""

    model_config = {"frozen": True}

    outcome: MoveOutcome
    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome != MoveOutcome.REJECTED

    @property
    def has_warning(self) -> bool:
        return self.outcome == MoveOutcome.ACCEPTED_WITH_WARNING


def reschedule_leg(job: Job, leg_index: int, new_date: datetime.date) -> Job:
    """Return a copy of *job* with one leg moved to *new_date*.

    Callers apply this only after :func:`validate_move` accepted the move,
    then re-run :func:`evaluate` on the new snapshot.
    """
    legs = list(job.legs)
    legs[leg_index] = legs[leg_index].model_copy(update={"date": new_date})
    return job.model_copy(update={"legs": tuple(legs)})
