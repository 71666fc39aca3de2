import httpx
import pytest

from plot_inventory.errors import ApiRequestError
from plot_inventory.services.api_client import (
    NETWORK_ERROR_MESSAGE,
    TIMEOUT_MESSAGE,
    ApiResponse,
    api_get,
    should_use_mock_data,
)
from plot_inventory.utils.config import config


def test_should_use_mock_data_follows_config(monkeypatch):
    monkeypatch.setattr(config, "USE_MOCK_DATA", True)
    assert should_use_mock_data() is True

    monkeypatch.setattr(config, "USE_MOCK_DATA", False)
    assert should_use_mock_data() is False


def test_api_get_unwraps_envelope_and_drops_empty_params(real_mode, make_client):
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, json={"success": True, "data": {"ok": 1}})

    resp = api_get(
        "/plots/inventory/sections",
        {"page": 1, "period": None, "search": "", "status": "sold_out"},
        client=make_client(handler),
    )

    assert resp.success
    assert resp.data == {"ok": 1}
    assert seen["url"].path == "/api/v1/plots/inventory/sections"
    assert dict(seen["url"].params) == {"page": "1", "status": "sold_out"}


def test_api_get_sends_bearer_token(real_mode, make_client, monkeypatch):
    monkeypatch.setattr(config, "API_TOKEN", "secret-token")
    seen = {}

    def handler(request):
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(200, json={"success": True, "data": {}})

    api_get("/plots/inventory/summary", client=make_client(handler))

    assert seen["auth"] == "Bearer secret-token"


def test_http_error_uses_server_error_body(real_mode, make_client):
    def handler(request):
        return httpx.Response(
            404,
            json={"success": False, "error": {"code": "NOT_FOUND", "message": "区画が見つかりません"}},
        )

    resp = api_get("/plots/inventory/summary", client=make_client(handler))

    assert not resp.success
    assert resp.error.code == "NOT_FOUND"
    assert resp.error.message == "区画が見つかりません"


def test_http_error_without_error_body(real_mode, make_client):
    resp = api_get(
        "/plots/inventory/summary",
        client=make_client(lambda request: httpx.Response(500, json={})),
    )

    assert resp.error.code == "HTTP_500"
    assert resp.error.message == "HTTP Error: 500"


def test_timeout_maps_to_timeout_error(real_mode, make_client):
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    resp = api_get("/plots/inventory/summary", client=make_client(handler))

    assert resp.error.code == "TIMEOUT"
    assert resp.error.message == TIMEOUT_MESSAGE


def test_connection_failure_maps_to_network_error(real_mode, make_client):
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    resp = api_get("/plots/inventory/summary", client=make_client(handler))

    assert resp.error.code == "NETWORK_ERROR"
    assert resp.error.message == NETWORK_ERROR_MESSAGE


def test_non_json_body_is_invalid_response(real_mode, make_client):
    resp = api_get(
        "/plots/inventory/summary",
        client=make_client(lambda request: httpx.Response(200, text="<html>oops</html>")),
    )

    assert resp.error.code == "INVALID_RESPONSE"


def test_unwrap_raises_for_error_response():
    with pytest.raises(ApiRequestError) as exc:
        ApiResponse.fail("TIMEOUT", TIMEOUT_MESSAGE).unwrap()

    assert exc.value.code == "TIMEOUT"
    assert ApiResponse.ok(5).unwrap() == 5


def test_string_error_body_falls_back_to_status(real_mode, make_client):
    resp = api_get(
        "/plots/inventory/summary",
        client=make_client(lambda request: httpx.Response(404, json={"error": "Not found"})),
    )

    assert resp.error.code == "HTTP_404"
    assert resp.error.message == "HTTP Error: 404"


def test_string_error_in_failed_envelope(real_mode, make_client):
    resp = api_get(
        "/plots/inventory/summary",
        client=make_client(
            lambda request: httpx.Response(200, json={"success": False, "error": "maintenance"})
        ),
    )

    assert not resp.success
    assert resp.error.code == "API_ERROR"
