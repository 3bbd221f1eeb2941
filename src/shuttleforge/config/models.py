"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``shuttleforge.toml`` only
carries overrides. An empty file (or none at all) yields the standard
dispatch policy.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
    show_legs: bool = True
