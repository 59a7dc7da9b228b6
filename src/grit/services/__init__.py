"""Service layer — business logic returning ServiceResult.

Services may import from domain and compiler layers.
They must never import from commands or output.
"""
