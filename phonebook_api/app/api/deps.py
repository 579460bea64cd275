"""
FastAPI dependencies shared by the endpoint modules.

The directory instance is created by ``create_app`` and stored on
``app.state``; routes obtain it through ``get_directory`` so each
application (and each test) works on its own collection.
"""

from fastapi import Request

from phonebook_api.app.services.person_service import PersonDirectory


def get_directory(request: Request) -> PersonDirectory:
    return request.app.state.directory
