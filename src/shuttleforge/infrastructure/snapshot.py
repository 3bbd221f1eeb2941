"""Snapshot documents — the (jobs, drivers) input of one evaluation.

A snapshot is a JSON or YAML mapping::

    route: main_salmon        # optional
    today: 2025-10-26         # optional reference date for urgency
    drivers: [{id, name, role, onDuty}, ...]
    jobs: [{id, car, legs: [...], tripPutIn, tripTakeOut}, ...]

Keys may be snake_case or the camelCase used by the dispatch front end.
"""

from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from shuttleforge.domain.models import Driver, Job

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class SnapshotError(ValueError):
    """The snapshot document could not be read or does not match the schema."""


class Snapshot(BaseModel):
    """One route's schedule as handed to the engine."""

    model_config = {"frozen": True}

    route: str | None = None
    today: datetime.date | None = None
    drivers: tuple[Driver, ...] = ()
    jobs: tuple[Job, ...] = ()

    def find_job(self, job_id: str) -> Job | None:
        return next((job for job in self.jobs if job.id == job_id), None)


def parse_snapshot(data: Any) -> Snapshot:
    """Validate an already-decoded document.

    Raises:
        SnapshotError: If *data* is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        msg = f"Snapshot must be a mapping, got {type(data).__name__}"
        raise SnapshotError(msg)
    try:
        return Snapshot.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid snapshot: {exc.error_count()} validation error(s)\n{exc}"
        raise SnapshotError(msg) from exc


def load_snapshot(path: Path) -> Snapshot:
    """Read a snapshot file. Format is picked by suffix (YAML, else JSON).

    Raises:
        FileNotFoundError: If *path* does not exist.
        SnapshotError: If the file cannot be decoded or validated.
    """
    if not path.is_file():
        raise FileNotFoundError(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise SnapshotError(msg) from exc

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = YAML(typ="safe").load(raw)
        else:
            data = json.loads(raw)
    except (YAMLError, json.JSONDecodeError) as exc:
        msg = f"Cannot parse {path}: {exc}"
        raise SnapshotError(msg) from exc

    return parse_snapshot(data)
