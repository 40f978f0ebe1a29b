"""
Pydantic schema definitions for API payloads.

Each resource (tags, tasks, users) defines its own create, update and
read models.  Schemas are separated from the entities in ``models`` to
decouple the API representation from persistence.
"""
