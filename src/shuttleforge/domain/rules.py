"""Rule toggles and thresholds for the dispatch engine.

Defaults reproduce the standard dispatch policy. The ``[rules]`` section of
``shuttleforge.toml`` overrides them sparsely.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DispatchRules(BaseModel):
    """Frozen rule set handed to every engine call."""

    model_config = {"frozen": True}

    # Leg B must land at least this many days after Leg A.
    min_leg_gap_days: int = Field(default=1, ge=0)
    # D-1 take-out rule: Leg B must finish this many days before the trip ends.
    enforce_takeout_rule: bool = True
    takeout_lead_days: int = Field(default=1, ge=0)
    require_van_coverage: bool = True
    warn_launch_day_move: bool = True
    soon_threshold_days: int = Field(default=3, ge=0)


DEFAULT_RULES = DispatchRules()
