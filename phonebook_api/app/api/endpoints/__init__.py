"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one part of the
surface (persons, info).  The routers are aggregated in ``router.py``.
"""
