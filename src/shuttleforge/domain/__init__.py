"""Domain layer — the dispatch rule and capacity engine.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
Every function here is pure: snapshots in, new values out.
"""
