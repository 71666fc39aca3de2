"""
Inventory backend HTTP client.

Every call returns an ApiResponse; transport failures are reported as error
responses (TIMEOUT / NETWORK_ERROR / INVALID_RESPONSE / HTTP_<status>)
rather than raised, so callers can fall back or surface the message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar

import httpx

from plot_inventory.errors import ApiRequestError
from plot_inventory.utils.config import config
from plot_inventory.utils.logger import get_logger

log = get_logger(__name__)

T = TypeVar("T")

TIMEOUT_MESSAGE = "リクエストがタイムアウトしました"
NETWORK_ERROR_MESSAGE = "ネットワークエラーが発生しました"
INVALID_RESPONSE_MESSAGE = "サーバーから不正な応答を受信しました"


@dataclass(frozen=True)
class ApiError:
    code: str
    message: str
    details: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[ApiError] = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, code: str, message: str, details=None) -> "ApiResponse[T]":
        return cls(success=False, error=ApiError(code, message, list(details or [])))

    def unwrap(self) -> T:
        """Return data or raise ApiRequestError for an error response."""
        if not self.success:
            err = self.error or ApiError("UNKNOWN", "Unknown API error")
            raise ApiRequestError(err.code, err.message, err.details)
        return self.data


def should_use_mock_data() -> bool:
    return config.USE_MOCK_DATA


def _debug(message: str, *args) -> None:
    if config.API_DEBUG:
        log.info("[API] " + message, *args)


def _clean_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    if not params:
        return {}
    return {
        key: str(value)
        for key, value in params.items()
        if value is not None and value != ""
    }


def _error_body(body: Any) -> Dict[str, Any]:
    # Some backends send a bare string as "error"
    error = body.get("error") if isinstance(body, dict) else None
    return error if isinstance(error, dict) else {}


def _headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if config.API_TOKEN:
        headers["Authorization"] = f"Bearer {config.API_TOKEN}"
    return headers


def api_request(
    method: str,
    endpoint: str,
    params: Optional[Mapping[str, Any]] = None,
    json: Any = None,
    client: Optional[httpx.Client] = None,
) -> ApiResponse[Any]:
    """
    Send one request to {API_URL}{endpoint} and unpack the {success, data} envelope.

    A caller-supplied client is used as-is (and not closed); otherwise a
    short-lived client is opened with the configured timeout.
    """
    url = f"{config.API_URL}{endpoint}"
    query = _clean_params(params)

    _debug("Request: %s %s %s", method, endpoint, query or "")

    try:
        if client is not None:
            response = client.request(method, url, params=query, json=json, headers=_headers())
        else:
            with httpx.Client(timeout=config.api_timeout_seconds) as owned:
                response = owned.request(method, url, params=query, json=json, headers=_headers())
    except httpx.TimeoutException:
        log.error("Request timeout | endpoint=%s timeout_ms=%s", endpoint, config.API_TIMEOUT)
        return ApiResponse.fail("TIMEOUT", TIMEOUT_MESSAGE)
    except httpx.HTTPError as e:
        log.error("Request failed | endpoint=%s error=%s", endpoint, e)
        return ApiResponse.fail("NETWORK_ERROR", NETWORK_ERROR_MESSAGE)

    try:
        body = response.json()
    except ValueError:
        log.error("Non-JSON response | endpoint=%s status=%s", endpoint, response.status_code)
        return ApiResponse.fail("INVALID_RESPONSE", INVALID_RESPONSE_MESSAGE)

    if not response.is_success:
        error = _error_body(body)
        _debug("Response Error: %s %s", response.status_code, error)
        return ApiResponse.fail(
            error.get("code") or f"HTTP_{response.status_code}",
            error.get("message") or f"HTTP Error: {response.status_code}",
            error.get("details"),
        )

    _debug("Response Success: %s", response.status_code)

    if isinstance(body, dict) and body.get("success") is False:
        error = _error_body(body)
        return ApiResponse.fail(
            error.get("code") or "API_ERROR",
            error.get("message") or "API Error",
            error.get("details"),
        )

    data = body.get("data") if isinstance(body, dict) and "data" in body else body
    return ApiResponse.ok(data)


def api_get(
    endpoint: str,
    params: Optional[Mapping[str, Any]] = None,
    client: Optional[httpx.Client] = None,
) -> ApiResponse[Any]:
    return api_request("GET", endpoint, params=params, client=client)
