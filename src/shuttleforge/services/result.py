"""ServiceResult and ServiceError — the contract between services and callers.

INVARIANT: All service-layer methods return ServiceResult. The CLI (and any
other front end) renders it; nothing above the service layer re-derives
engine decisions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"evaluate"``, ``"validate_move"``).
        data: Operation-specific payload. Kept on failure when the caller
            still needs it (e.g. a blocked evaluation report).
        warnings: Advisory messages that never block.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (snapshot path, route, reference date).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
