"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store's ``Student`` records so the
JSON representation (camelCase keys, derived fields such as ``age``)
can evolve without touching storage.
"""
