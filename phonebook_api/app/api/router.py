"""
Top‑level router.

Aggregates the endpoint routers under their public paths.  The person
routes live under ``/api/persons`` while the info page is served from
``/info`` outside the ``/api`` prefix.
"""

from fastapi import APIRouter

from .endpoints import info, persons

router = APIRouter()

router.include_router(persons.router, prefix="/api/persons", tags=["persons"])
router.include_router(info.router, prefix="/info", tags=["info"])
