"""
Phonebook endpoints.

These routes expose list, lookup, create and delete operations on the
contact directory.  Entries are never updated in place; to change a
number, delete the entry and create it again.

All handlers are coroutines that never await while touching the
directory, so each one runs to completion on the event loop before the
next request handler starts.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from phonebook_api.app.api.deps import get_directory
from phonebook_api.app.schemas.person import PersonCreate, PersonRead
from phonebook_api.app.services.person_service import PersonDirectory, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[PersonRead])
@router.get("/", response_model=List[PersonRead], include_in_schema=False)
async def list_persons(directory: PersonDirectory = Depends(get_directory)) -> List[PersonRead]:
    """Return every phonebook entry."""
    return directory.list_persons()


@router.get("/{person_id}", response_model=PersonRead)
@router.get("/{person_id}/", response_model=PersonRead, include_in_schema=False)
async def get_person(person_id: str, directory: PersonDirectory = Depends(get_directory)):
    """Retrieve a single entry by id.

    Returns HTTP 404 with an empty body if no entry has that id.
    """
    person = directory.get_person(person_id)
    if person is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return person


@router.post("", response_model=PersonRead)
@router.post("/", response_model=PersonRead, include_in_schema=False)
async def create_person(
    person_in: Optional[PersonCreate] = None,
    directory: PersonDirectory = Depends(get_directory),
):
    """Create a new entry and return it with its assigned id.

    Responds with HTTP 400 and ``{"error": <message>}`` when the name or
    number is missing or the name is already taken.  A request without a
    body is treated as an empty object.
    """
    try:
        return directory.create_person(person_in or PersonCreate())
    except ValidationError as exc:
        logger.info("Rejected person: %s", exc.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.delete("/{person_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
async def delete_person(person_id: str, directory: PersonDirectory = Depends(get_directory)) -> Response:
    """Delete an entry.  Unknown ids are ignored and still answer 204."""
    directory.delete_person(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
