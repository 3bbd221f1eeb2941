"""Service layer — engine orchestration returning ServiceResult.

Services may import from domain, infrastructure and config models.
They must never import from commands or output.
"""
