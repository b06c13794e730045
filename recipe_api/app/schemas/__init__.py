"""
Pydantic schema definitions for API payloads.

Schemas are separated from database rows to decouple the API
representation (``cookTime``) from persistence (``cook_time``).
"""
