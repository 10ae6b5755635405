"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain models so that the API
representation can change without touching persistence.
"""
