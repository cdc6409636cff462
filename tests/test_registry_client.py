"""Tests for the HTTP registry client, using httpx.MockTransport."""

import httpx
import pytest

from schema_validator.errors import FetchError, NotFoundError
from schema_validator._internal.io.registry import RegistryClient

BASE_URL = "http://registry.test:8081"


def _client(handler) -> RegistryClient:
    return RegistryClient(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_list_versions():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[1, 2, 3])

    assert _client(handler).list_versions("orders") == [1, 2, 3]
    assert requests[0].method == "GET"
    assert str(requests[0].url) == f"{BASE_URL}/subjects/orders/versions"


def test_list_versions_unknown_subject_raises_not_found():
    def handler(request):
        return httpx.Response(404, json={"error_code": 40401, "message": "Subject not found."})

    with pytest.raises(NotFoundError) as excinfo:
        _client(handler).list_versions("new-widget")
    assert excinfo.value.subject == "new-widget"


@pytest.mark.parametrize("status", [401, 500, 503])
def test_list_versions_other_failures_raise_fetch_error(status):
    def handler(request):
        return httpx.Response(status, json={"message": "nope"})

    with pytest.raises(FetchError) as excinfo:
        _client(handler).list_versions("orders")
    assert not isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.status_code == status


def test_list_versions_unexpected_payload():
    def handler(request):
        return httpx.Response(200, json={"versions": [1]})

    with pytest.raises(FetchError):
        _client(handler).list_versions("orders")


def test_transport_error_raises_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError, match="failed"):
        _client(handler).list_versions("orders")


def test_timeout_raises_fetch_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(FetchError, match="Timed out"):
        _client(handler).get_schema("orders", 1)


def test_get_schema_returns_schema_text():
    def handler(request):
        assert request.url.path == "/subjects/orders/versions/2"
        return httpx.Response(200, json={"subject": "orders", "version": 2, "id": 7, "schema": '"string"'})

    assert _client(handler).get_schema("orders", 2) == '"string"'


def test_get_schema_404_is_fetch_error():
    def handler(request):
        return httpx.Response(404, json={"error_code": 40402})

    with pytest.raises(FetchError) as excinfo:
        _client(handler).get_schema("orders", 9)
    assert not isinstance(excinfo.value, NotFoundError)


def test_get_schema_non_json_body():
    def handler(request):
        return httpx.Response(200, text="<html>proxy error</html>")

    with pytest.raises(FetchError, match="non-JSON"):
        _client(handler).get_schema("orders", 1)


def test_subject_is_url_encoded_and_base_url_trailing_slash_dropped():
    seen = []

    def handler(request):
        seen.append(request.url.raw_path)
        return httpx.Response(200, json=[])

    client = RegistryClient(BASE_URL + "/", client=httpx.Client(transport=httpx.MockTransport(handler)))
    client.list_versions("team/orders")
    assert seen == [b"/subjects/team%2Forders/versions"]


def test_injected_client_is_not_closed():
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))
    with RegistryClient(BASE_URL, client=http_client) as client:
        client.list_versions("orders")
    assert not http_client.is_closed
