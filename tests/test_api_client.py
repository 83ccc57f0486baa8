from unittest.mock import MagicMock

import pytest
import requests

from pomlab.api.client import ApiClient
from pomlab.shared.errors import ApiError
from pomlab.shared.schemas import ErrorPayload, LoginToken, Post, User


def _response(status, payload=b"", content_type="application/json; charset=utf-8"):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.headers = {"Content-Type": content_type}
    resp.content = payload
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session, headers={})


def test_get_user(session):
    session.request.return_value = _response(
        200, b'{"id": 1, "name": "Leanne Graham", "email": "Sincere@april.biz", "username": "Bret"}'
    )
    client = ApiClient("https://jsonplaceholder.typicode.com/", session=session)

    user = client.get_model("/users/1", User)

    assert user.name == "Leanne Graham"
    assert user.email == "Sincere@april.biz"
    session.request.assert_called_once_with(
        "GET", "https://jsonplaceholder.typicode.com/users/1", json=None, timeout=10.0
    )


def test_post_creates_resource(session):
    session.request.return_value = _response(
        201, b'{"id": 101, "title": "Playwright Test", "body": "Test post content", "userId": 1}'
    )
    client = ApiClient("https://jsonplaceholder.typicode.com", session=session)
    payload = {"title": "Playwright Test", "body": "Test post content", "userId": 1}

    resp = client.post("posts", json=payload)

    assert resp.status == 201
    assert resp.ok
    post = resp.parse(Post)
    assert post.id == 101
    assert post.user_id == 1
    assert session.request.call_args.kwargs["json"] == payload


def test_error_payload(session):
    session.request.return_value = _response(400, b'{"error": "Missing password"}')
    client = ApiClient("https://reqres.in/api", session=session)

    resp = client.post("register", json={"email": "test@example.com"})

    assert resp.status == 400
    assert not resp.ok
    assert resp.parse(ErrorPayload).error == "Missing password"
    with pytest.raises(ApiError) as excinfo:
        client.post_model("register", {"email": "test@example.com"}, LoginToken)
    assert excinfo.value.status == 400


def test_schema_mismatch_raises_api_error(session):
    session.request.return_value = _response(200, b'{"id": "not-a-number"}')
    client = ApiClient("https://jsonplaceholder.typicode.com", session=session)
    with pytest.raises(ApiError, match="not a valid User"):
        client.get_model("users/1", User)


def test_content_type(session):
    session.request.return_value = _response(200, b"<html></html>", content_type="text/html; charset=utf-8")
    client = ApiClient("https://httpbin.org", session=session)
    assert client.get("html").content_type == "text/html"


def test_absolute_url_passes_through(session):
    session.request.return_value = _response(200, b"{}")
    client = ApiClient("https://jsonplaceholder.typicode.com", session=session)
    client.delete("https://example.com/thing/1")
    assert session.request.call_args.args == ("DELETE", "https://example.com/thing/1")
