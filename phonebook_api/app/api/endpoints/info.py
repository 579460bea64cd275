"""
Information page.

Returns a short HTML fragment with the number of phonebook entries and
the server's local time.  Meant for humans checking that the service is
alive, not for programmatic use.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from phonebook_api.app.api.deps import get_directory
from phonebook_api.app.services.person_service import PersonDirectory

router = APIRouter()


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format ``moment`` like ``Mon Oct 19 2026 10:00:00 GMT+0000 (UTC)``.

    Naive or missing values are taken as local time.
    """
    moment = moment or datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return f"{moment:%a %b %d %Y %H:%M:%S} GMT{moment:%z} ({moment.tzname()})"


@router.get("", response_class=HTMLResponse)
@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def get_info(directory: PersonDirectory = Depends(get_directory)) -> str:
    return (
        f"<p>Phonebook has info for {directory.count()} people</p>\n"
        f"<p>{format_timestamp()}</p>\n"
    )
