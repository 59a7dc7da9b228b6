"""Domain layer — commit kinds, the validated Message entity, and templates.

This layer depends only on stdlib and the compiler's AST shape.
It must never import from services, config, commands, or output.
"""
