"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, database, logging, exceptions),
``models`` (ORM tables), ``schemas`` (API payloads), ``repositories``
(queries), ``services`` (business rules) and ``api`` (versioned
routers).
"""

from .main import app  # noqa: F401
