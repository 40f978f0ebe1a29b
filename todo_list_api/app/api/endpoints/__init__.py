"""
Endpoint modules.

Each module defines an APIRouter for one resource (tags, tasks,
users).  The routers are aggregated in ``api/router.py``; ``health``
is mounted at the application root.
"""
