"""Infrastructure layer — reading caller-supplied snapshot documents.

This layer depends on stdlib, pydantic and ruamel.yaml, and may build
domain models. It must never import from services, commands, or output.
Nothing here writes: persistence belongs to the calling application.
"""
