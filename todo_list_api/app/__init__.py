"""
Application package.

Layers, from the outside in: ``api`` (FastAPI routers), ``services``
(business rules), ``repositories`` (SQLite persistence), with
``schemas`` describing the HTTP payloads and ``models`` the stored
entities.
"""

from .main import app, create_app  # noqa: F401
