"""To-Do List API client.

This module defines a small client wrapper around the REST API served
by ``todo_list_api``.  It uses the ``requests`` library internally and
exposes one method per operation:

* tags: :meth:`list_tags`, :meth:`get_tag`, :meth:`create_tag`,
  :meth:`update_tag`, :meth:`delete_tag`;
* tasks: :meth:`list_tasks`, :meth:`get_task`, :meth:`get_tasks_by_tags`,
  :meth:`create_task`, :meth:`update_task`, :meth:`delete_task`;
* users: :meth:`list_users`, :meth:`get_user`, :meth:`get_user_by_email`,
  :meth:`create_user`, :meth:`update_user`, :meth:`delete_user`.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty (``None``, ``[]`` or
``False``) and ``error`` is a dictionary with the keys ``status_code``
and ``message``.  Transport problems (connection refused, timeouts)
are reported the same way with ``status_code`` set to ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TodoListClient:
    """Client for interacting with the To-Do List API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path under which the resources are mounted.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/tags``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``.
        """
        url = f"{self.base_url}{self.api_prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") if isinstance(err_json, dict) else str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, resource: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/{resource}", params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _get(self, path: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", path)

    def _create(self, resource: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/{resource}", json_body=payload)

    def _update(self, resource: str, item_id: int, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/{resource}/{item_id}", json_body=payload)
        return error is None, error

    def _delete(self, resource: str, item_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/{resource}/{item_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------
    def list_tags(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("tags")

    def get_tag(self, tag_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get(f"/tags/{tag_id}")

    def create_tag(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a tag.  A duplicate name is reported as a 400 error."""
        return self._create("tags", {"name": name})

    def update_tag(self, tag_id: int, name: str) -> Tuple[bool, Optional[Error]]:
        return self._update("tags", tag_id, {"name": name})

    def delete_tag(self, tag_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete("tags", tag_id)

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("tasks")

    def get_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get(f"/tasks/{task_id}")

    def get_tasks_by_tags(self, tag_ids: Iterable[int]) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return tasks carrying any of ``tag_ids``."""
        data, error = self._request("GET", "/tasks/by-tags", params={"tagIds": list(tag_ids)})
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def create_task(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a task.

        Args:
            payload: Task fields: ``title`` (required), ``description``,
                ``is_completed``, ``due_date``, ``user_id``, ``tag_ids``.
        """
        return self._create("tasks", payload)

    def update_task(self, task_id: int, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        return self._update("tasks", task_id, payload)

    def delete_task(self, task_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete("tasks", task_id)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("users")

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get(f"/users/{user_id}")

    def get_user_by_email(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._get(f"/users/email/{quote(email, safe='@')}")

    def create_user(self, email: str, full_name: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._create("users", {"email": email, "full_name": full_name})

    def update_user(self, user_id: int, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        return self._update("users", user_id, payload)

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete("users", user_id)
