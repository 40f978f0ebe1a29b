"""
Top-level package for the To-Do List API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``todo_list_api.app.main:app``.
"""

__all__ = []
__version__ = "1.0.0"
