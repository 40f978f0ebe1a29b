"""
HTTP layer of the To-Do List API.

Routers in ``endpoints`` translate requests into service calls and
service outcomes into status codes.  They are aggregated in
``router.py`` and mounted under ``/api`` by ``main.create_app``.
"""
