# tests/test_client.py

import json
from unittest.mock import MagicMock

import pytest
import requests

from todo_list_client import TodoListClient


def _response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode()
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


@pytest.fixture()
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture()
def api(session):
    return TodoListClient(base_url="http://localhost:8000/", session=session)


def test_create_tag_posts_to_prefixed_url(api, session):
    session.request.return_value = _response(201, {"id": 1, "name": "Urgent"})

    data, error = api.create_tag("Urgent")

    assert error is None
    assert data == {"id": 1, "name": "Urgent"}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://localhost:8000/api/tags"
    assert kwargs["json"] == {"name": "Urgent"}


def test_http_error_is_returned_with_detail(api, session):
    session.request.return_value = _response(400, {"detail": "Tag could not be created"})

    data, error = api.create_tag("Urgent")

    assert data is None
    assert error == {"status_code": 400, "message": "Tag could not be created"}


def test_update_reports_success_for_empty_204(api, session):
    session.request.return_value = _response(204)

    assert api.update_tag(1, "New") == (True, None)


def test_delete_missing_reports_failure(api, session):
    session.request.return_value = _response(404, {"detail": "Tag with ID 99 not found."})

    ok, error = api.delete_tag(99)

    assert ok is False
    assert error["status_code"] == 404


def test_transport_error_has_no_status(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    items, error = api.list_tasks()

    assert items == []
    assert error["status_code"] is None


def test_get_tasks_by_tags_sends_repeated_parameter(api, session):
    session.request.return_value = _response(200, [])

    api.get_tasks_by_tags([1, 2])

    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "http://localhost:8000/api/tasks/by-tags"
    assert kwargs["params"] == {"tagIds": [1, 2]}


def test_get_user_by_email_path(api, session):
    session.request.return_value = _response(200, {"id": 1, "email": "a@b.io"})

    api.get_user_by_email("a@b.io")

    assert session.request.call_args.kwargs["url"] == "http://localhost:8000/api/users/email/a@b.io"
