"""Tests for the job validator."""

from __future__ import annotations

from datetime import date

from shuttleforge.domain.models import Job, Leg
from shuttleforge.domain.types import Severity
from shuttleforge.domain.validation import (
    CODE_LEG_ORDER,
    CODE_LEG_SPACING,
    CODE_MISSING_DRIVER,
    CODE_NO_LEGS,
    CODE_TOO_MANY_LEGS,
    check_drivers,
    check_structure,
    validate_jobs,
)


def _leg(label: str | None, day: str, driver: str | None = "D1") -> Leg:
    return Leg(label=label, date=date.fromisoformat(day), driver_id=driver)


def _job(job_id: str, *legs: Leg) -> Job:
    return Job(id=job_id, legs=legs)


class TestCheckStructure:
    def test_no_legs(self) -> None:
        issues = check_structure(_job("J-0"))
        assert [i.code for i in issues] == [CODE_NO_LEGS]
        assert issues[0].message == "Job J-0: must have at least one leg"
        assert issues[0].severity == Severity.ERROR

    def test_single_leg_unlabeled_ok(self) -> None:
        assert check_structure(_job("J-1", _leg(None, "2025-10-28"))) == []

    def test_single_leg_any_label_ok(self) -> None:
        assert check_structure(_job("J-1", _leg("B", "2025-10-28"))) == []
        assert check_structure(_job("J-1", _leg("C", "2025-10-28"))) == []

    def test_well_formed_pair(self) -> None:
        job = _job("J-2", _leg("A", "2025-10-26"), _leg("B", "2025-10-27"))
        assert check_structure(job) == []

    def test_swapped_labels(self) -> None:
        job = _job("J-3", _leg("B", "2025-10-26"), _leg("A", "2025-10-27"))
        issues = check_structure(job)
        assert [i.code for i in issues] == [CODE_LEG_ORDER]
        assert issues[0].message == "Job J-3: legs must be in order A then B"

    def test_unknown_label_on_pair(self) -> None:
        job = _job("J-3", _leg("A", "2025-10-26"), _leg("C", "2025-10-27"))
        assert [i.code for i in check_structure(job)] == [CODE_LEG_ORDER]

    def test_lowercase_label_on_pair(self) -> None:
        job = _job("J-3", _leg("a", "2025-10-26"), _leg("B", "2025-10-27"))
        assert [i.code for i in check_structure(job)] == [CODE_LEG_ORDER]

    def test_missing_label_on_pair(self) -> None:
        job = _job("J-3", _leg("A", "2025-10-26"), _leg(None, "2025-10-27"))
        assert [i.code for i in check_structure(job)] == [CODE_LEG_ORDER]

    def test_same_day(self) -> None:
        job = _job("J-4", _leg("A", "2025-10-26"), _leg("B", "2025-10-26"))
        issues = check_structure(job)
        assert [i.code for i in issues] == [CODE_LEG_SPACING]
        assert issues[0].message == "Job J-4: Leg B must be at least the next day after Leg A"

    def test_b_before_a(self) -> None:
        job = _job("J-5", _leg("A", "2025-10-27"), _leg("B", "2025-10-26"))
        assert [i.code for i in check_structure(job)] == [CODE_LEG_SPACING]

    def test_order_and_spacing_both_reported(self) -> None:
        job = _job("J-6", _leg("B", "2025-10-26"), _leg("A", "2025-10-26"))
        assert [i.code for i in check_structure(job)] == [CODE_LEG_ORDER, CODE_LEG_SPACING]

    def test_too_many_legs(self) -> None:
        job = _job(
            "J-7",
            _leg("A", "2025-10-26"),
            _leg("B", "2025-10-27"),
            _leg("B", "2025-10-28"),
        )
        issues = check_structure(job)
        assert [i.code for i in issues] == [CODE_TOO_MANY_LEGS]
        assert issues[0].message == "Job J-7: too many legs (3)"

    def test_min_gap_configurable(self) -> None:
        job = _job("J-8", _leg("A", "2025-10-26"), _leg("B", "2025-10-27"))
        assert check_structure(job, min_leg_gap_days=2)[0].code == CODE_LEG_SPACING
        same_day = _job("J-9", _leg("A", "2025-10-26"), _leg("B", "2025-10-26"))
        assert check_structure(same_day, min_leg_gap_days=0) == []


class TestCheckDrivers:
    def test_warning_per_unassigned_leg(self) -> None:
        job = _job("J-1", _leg("A", "2025-10-26", None), _leg("B", "2025-10-27", None))
        issues = check_drivers(job)
        assert [i.message for i in issues] == [
            "Job J-1: missing driver assignment on Leg A",
            "Job J-1: missing driver assignment on Leg B",
        ]
        assert all(i.severity == Severity.WARNING for i in issues)
        assert all(i.code == CODE_MISSING_DRIVER for i in issues)

    def test_unlabeled_leg_shows_placeholder(self) -> None:
        issues = check_drivers(_job("J-2", _leg(None, "2025-10-28", None)))
        assert issues[0].message.endswith("on Leg ?")

    def test_all_assigned(self) -> None:
        assert check_drivers(_job("J-3", _leg("A", "2025-10-26"))) == []


class TestValidateJobs:
    def test_errors_precede_warnings(self) -> None:
        jobs = [
            _job("J-1", _leg("A", "2025-10-26", None)),
            _job("J-2", _leg("A", "2025-10-26"), _leg("B", "2025-10-26")),
        ]
        issues = validate_jobs(jobs)
        assert [i.code for i in issues] == [CODE_LEG_SPACING, CODE_MISSING_DRIVER]

    def test_broken_job_still_gets_driver_checks(self) -> None:
        job = _job(
            "J-1",
            _leg("A", "2025-10-26", None),
            _leg("B", "2025-10-27"),
            _leg("B", "2025-10-28", None),
        )
        codes = [i.code for i in validate_jobs([job])]
        assert codes == [CODE_TOO_MANY_LEGS, CODE_MISSING_DRIVER, CODE_MISSING_DRIVER]

    def test_one_bad_job_does_not_hide_others(self) -> None:
        jobs = [_job("J-0"), _job("J-1", _leg("B", "2025-10-26"), _leg("A", "2025-10-27"))]
        assert {i.job_id for i in validate_jobs(jobs)} == {"J-0", "J-1"}

    def test_unknown_label_does_not_hide_others(self) -> None:
        jobs = [
            _job("J-1", _leg("A", "2025-10-26"), _leg("C", "2025-10-27")),
            _job("J-2", _leg("A", "2025-10-26"), _leg("B", "2025-10-26", None)),
        ]
        assert [(i.job_id, i.code) for i in validate_jobs(jobs)] == [
            ("J-1", CODE_LEG_ORDER),
            ("J-2", CODE_LEG_SPACING),
            ("J-2", CODE_MISSING_DRIVER),
        ]

    def test_clean_batch(self) -> None:
        assert validate_jobs([]) == []
