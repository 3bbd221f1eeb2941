"""BaseService — shared foundation for shuttleforge services.

Every service receives the active :class:`DispatchRules` at construction
time and hands them to each engine call. Services hold no schedule state:
each call gets a snapshot, evaluates it, and returns a ServiceResult.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from shuttleforge.domain.rules import DEFAULT_RULES, DispatchRules
from shuttleforge.infrastructure.snapshot import Snapshot, SnapshotError, load_snapshot
from shuttleforge.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DispatchService(BaseService):
            def evaluate(self, snapshot: Snapshot) -> ServiceResult:
                evaluation = evaluate(snapshot.jobs, snapshot.drivers, self._rules)
                ...
    """

    def __init__(self, rules: DispatchRules | None = None) -> None:
        self._rules = rules or DEFAULT_RULES

    @property
    def rules(self) -> DispatchRules:
        return self._rules

    @staticmethod
    def _load(path: Path, *, op: str) -> Snapshot | ServiceResult:
        """Load a snapshot file, or return the failed ServiceResult for *op*."""
        try:
            return load_snapshot(path)
        except FileNotFoundError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="SNAPSHOT_NOT_FOUND",
                    message=f"Snapshot file not found: {path}",
                    detail={"path": str(path)},
                ),
            )
        except SnapshotError as exc:
            log.warning("snapshot.invalid", path=str(path), op=op)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_SNAPSHOT",
                    message=str(exc),
                    detail={"path": str(path)},
                ),
            )
