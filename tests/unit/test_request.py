"""Tests for RequestSpec transitions."""

import dataclasses

import pytest

from edgegrid_client.request import RequestSpec, SignedRequest, serialize_body

HOST = "https://akab-host.luna.akamaiapis.net"


@pytest.mark.unit
def test_with_defaults_fills_missing_fields():
    spec = RequestSpec(path="/a").with_defaults(HOST)

    assert spec.url == HOST + "/a"
    assert spec.method == "GET"
    assert spec.headers == {"Content-Type": "application/json"}
    assert spec.body == ""
    assert spec.follow_redirect is False


@pytest.mark.unit
def test_with_defaults_keeps_caller_values():
    spec = RequestSpec(
        path="/a",
        method="post",
        headers={"content-type": "text/plain"},
        url="https://other.example.net/a",
        body="raw",
    ).with_defaults(HOST)

    assert spec.url == "https://other.example.net/a"
    assert spec.method == "POST"
    assert spec.headers == {"content-type": "text/plain"}
    assert spec.body == "raw"


@pytest.mark.unit
def test_with_defaults_serializes_structured_body():
    spec = RequestSpec(path="/a", body={"name": "x", "ids": [1, 2]}).with_defaults(HOST)

    assert spec.body == '{"name":"x","ids":[1,2]}'


@pytest.mark.unit
def test_with_defaults_returns_new_value():
    original = RequestSpec(path="/a")
    defaulted = original.with_defaults(HOST)

    assert original.url is None
    assert original.headers == {}
    assert defaulted is not original


@pytest.mark.unit
def test_redirected_to_clears_url_and_authorization():
    spec = RequestSpec(path="/a", headers={"Authorization": "old", "X-Keep": "1"}).with_defaults(HOST)

    redirected = spec.redirected_to("/b")

    assert redirected.path == "/b"
    assert redirected.url is None
    assert redirected.headers == {"X-Keep": "1", "Content-Type": "application/json"}
    assert spec.path == "/a"
    assert spec.url == HOST + "/a"


@pytest.mark.unit
def test_spec_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        RequestSpec(path="/a").path = "/b"


@pytest.mark.unit
def test_from_mapping_accepts_aliases():
    spec = RequestSpec.from_mapping(
        {"path": "/a", "method": "PUT", "headersToSign": ["X-A"], "followRedirect": False, "headers": {"X-A": "1"}}
    )

    assert spec.headers_to_sign == ("X-A",)
    assert spec.method == "PUT"
    assert spec.headers == {"X-A": "1"}


@pytest.mark.unit
def test_from_mapping_requires_path():
    with pytest.raises(ValueError):
        RequestSpec.from_mapping({"method": "GET"})


@pytest.mark.unit
def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError) as exc_info:
        RequestSpec.from_mapping({"path": "/a", "qs": {"limit": "10"}, "timeout": 5})

    assert "qs" in str(exc_info.value)
    assert "timeout" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize(("body", "expected"), [(None, ""), ("text", "text"), (b"raw", b"raw"), ([1], "[1]")])
def test_serialize_body(body, expected):
    assert serialize_body(body) == expected


@pytest.mark.unit
def test_signed_request_content_and_authorization():
    signed = SignedRequest(
        spec=RequestSpec(path="/a"),
        url=HOST + "/a",
        method="GET",
        headers={"authorization": "EG1-HMAC-SHA256 x"},
        body="héllo",
    )

    assert signed.content == "héllo".encode()
    assert signed.authorization == "EG1-HMAC-SHA256 x"
