"""Service layer — viewer orchestration and ServiceResult-returning operations.

Services may import from domain, engine, and infrastructure layers.
They must never import from commands or output.
"""
