"""Service layer — the configuration builder and its result type.

Services may import from domain and config layers.
They must never import from plugins at module level.
"""
