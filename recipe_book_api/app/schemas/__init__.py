"""
Pydantic schema definitions for API payloads.

Schemas are separated from store documents to decouple the API
representation from persistence.
"""
