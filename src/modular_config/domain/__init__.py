"""Domain layer — formats, power tests, errors, and the field schema.

This layer depends only on stdlib.
It must never import from services, config, or plugins.
"""
