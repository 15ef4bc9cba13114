"""HTTP tests for the store dump route."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

import controller.store_controller as store_controller
from main import create_app
from util.constants import InternalURIs


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def test_post_returns_snapshot_nested_as_string(client, users_store: str) -> None:
    """A valid store path should come back as stringified snapshot JSON."""
    response = client.post(InternalURIs.DUMP_STORE, json={"input": users_store})

    inner = (
        '{"path":' + json.dumps(users_store)
        + ',"buckets":{"users":{"0102":"alice"}}}'
    )
    expected = json.dumps({"result": inner}, separators=(",", ":"))
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.content == expected.encode("utf-8")
    assert json.loads(response.json()["result"]) == {
        "path": users_store,
        "buckets": {"users": {"0102": "alice"}},
    }


def test_post_missing_store_sends_no_body(client) -> None:
    """A failed extraction should never produce a JSON payload."""
    response = client.post(InternalURIs.DUMP_STORE, json={"input": "/does/not/exist"})

    assert response.content == b""
    assert "application/json" not in response.headers.get("content-type", "")


def test_get_is_method_not_allowed(client) -> None:
    """Only POST is routed."""
    response = client.get(InternalURIs.DUMP_STORE)

    assert response.status_code == 405


def test_post_malformed_json_is_bad_request(client) -> None:
    """A body that isn't JSON is rejected before extraction."""
    response = client.post(
        InternalURIs.DUMP_STORE,
        content=b'{"input": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


@pytest.mark.parametrize(
    "body",
    [{"path": "/tmp/x"}, {"input": 5}, {"input": "/tmp/x", "extra": True}, ["/tmp/x"]],
)
def test_post_wrong_shape_is_bad_request(client, body) -> None:
    """Anything other than {"input": <string>} is a 400."""
    response = client.post(InternalURIs.DUMP_STORE, json=body)

    assert response.status_code == 400


def test_post_response_encoding_failure_is_internal_error(
    client, users_store: str, monkeypatch
) -> None:
    """If the outer envelope can't be encoded the route answers 500."""

    def _broken(*args, **kwargs):
        raise ValueError("cannot encode")

    monkeypatch.setattr(store_controller, "JSONResponse", _broken)

    response = client.post(InternalURIs.DUMP_STORE, json={"input": users_store})

    assert response.status_code == 500


@pytest.mark.parametrize(
    "headers",
    [{}, {"Content-Type": "application/x-www-form-urlencoded"}],
)
def test_post_json_body_without_json_content_type_is_accepted(
    client, users_store: str, headers
) -> None:
    """The body is read as JSON regardless of the declared content type."""
    body = json.dumps({"input": users_store}).encode("utf-8")

    response = client.post(InternalURIs.DUMP_STORE, content=body, headers=headers)

    assert response.status_code == 200
    assert json.loads(response.json()["result"])["buckets"] == {
        "users": {"0102": "alice"}
    }


def test_post_missing_store_without_content_type_sends_no_body(client) -> None:
    """A well-formed body with no content type still reaches extraction."""
    response = client.post(
        InternalURIs.DUMP_STORE, content=b'{"input":"/does/not/exist"}'
    )

    assert response.status_code != 400
    assert response.content == b""
