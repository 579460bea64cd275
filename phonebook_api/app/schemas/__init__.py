"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the directory service so that the wire
representation can change without touching storage.
"""
