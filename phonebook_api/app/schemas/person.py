"""
Pydantic schemas for phonebook entries.

A person is an ``id``/``name``/``number`` triple.  Both fields of the
create payload are optional at the schema level: presence is checked
by ``PersonDirectory.create_person`` so that a missing field is
reported with the service's own error message rather than a generic
validation error.  Unknown fields are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonCreate(BaseModel):
    """Schema for creating a new phonebook entry."""

    name: Optional[str] = Field(None, description="Display name, unique across the phonebook")
    number: Optional[str] = Field(None, description="Phone number, free‑form")


class PersonRead(BaseModel):
    """Schema for reading a phonebook entry."""

    id: str = Field(..., description="Server‑assigned identifier")
    name: str
    number: str
