"""Domain layer — style name grammar, errors, and the value type.

This layer depends only on stdlib.
It must never import from services, config, output, or commands.
"""
