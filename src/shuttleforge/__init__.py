"""shuttleforge — dispatch rule and capacity engine for multi-day car shuttles."""

__version__ = "0.3.0"
