"""Shared pytest fixtures for shuttleforge tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's shuttleforge.toml or env overrides out of tests."""
    monkeypatch.delenv("SHUTTLEFORGE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def roster() -> list[dict[str, Any]]:
    """Three on-duty shuttle drivers and one on-duty van crew."""
    return [
        {"id": "D1", "name": "Mike W", "role": "shuttle", "onDuty": True},
        {"id": "D2", "name": "Sasha R", "role": "shuttle", "onDuty": True},
        {"id": "D3", "name": "Troy H", "role": "shuttle", "onDuty": True},
        {"id": "V1", "name": "Van Crew", "role": "van", "onDuty": True},
    ]


@pytest.fixture
def route_document(roster: list[dict[str, Any]]) -> dict[str, Any]:
    """The Main Salmon demo route: one clean two-leg job, one single-leg job,
    and one same-day two-leg job with an unassigned B leg."""
    return {
        "route": "main_salmon",
        "today": "2025-10-26",
        "drivers": roster,
        "jobs": [
            {
                "id": "J-1002",
                "car": {"owner": "Wilson", "makeModel": "Toyota 4Runner", "plate": "ID-7S1234"},
                "tripPutIn": "2025-10-26",
                "tripTakeOut": "2025-10-31",
                "legs": [
                    {
                        "leg": "A",
                        "startLocation": "Corn Creek",
                        "endLocation": "Stanley Yard",
                        "date": "2025-10-26",
                        "depart": "07:30",
                        "arrive": "10:45",
                        "driverId": "D2",
                    },
                    {
                        "leg": "B",
                        "startLocation": "Stanley Yard",
                        "endLocation": "Hammer Creek",
                        "date": "2025-10-27",
                        "depart": "11:15",
                        "arrive": "16:30",
                        "driverId": "D3",
                    },
                ],
            },
            {
                "id": "J-2001",
                "car": {"owner": "Solo", "makeModel": "Chevy Tahoe", "plate": "OR-9XY123"},
                "legs": [
                    {
                        "leg": "A",
                        "startLocation": "Corn Creek",
                        "endLocation": "Hammer Creek",
                        "date": "2025-10-28",
                        "driverId": "D1",
                    },
                ],
            },
            {
                "id": "J-1003",
                "car": {"owner": "Ramirez", "makeModel": "Ford F-150", "plate": "WA-C56789B"},
                "tripPutIn": "2025-10-26",
                "tripTakeOut": "2025-11-01",
                "legs": [
                    {"leg": "A", "date": "2025-10-26", "driverId": "D1"},
                    {"leg": "B", "date": "2025-10-26"},
                ],
            },
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, route_document: dict[str, Any]) -> Path:
    """The demo route written as a JSON snapshot."""
    path = tmp_path / "main_salmon.json"
    path.write_text(json.dumps(route_document), encoding="utf-8")
    return path


@pytest.fixture
def clean_snapshot_file(tmp_path: Path, route_document: dict[str, Any]) -> Path:
    """The demo route without the broken J-1003 job."""
    document = dict(route_document)
    document["jobs"] = [j for j in route_document["jobs"] if j["id"] != "J-1003"]
    path = tmp_path / "clean.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
