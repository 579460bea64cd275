"""
Service layer abstraction.

The directory service encapsulates all contact logic.  Handlers receive
a directory instance through dependency injection instead of touching
module‑level state.
"""
