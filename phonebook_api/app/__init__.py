"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging under ``core``, request and
response models under ``schemas``, the in‑memory contact directory
under ``services`` and the HTTP routes under ``api``.
"""

from .main import app  # noqa: F401
