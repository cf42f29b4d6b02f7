"""
HTTP client for the food delivery REST API.

Every request is authenticated with the bearer token of the injected
AdminSession. Non-2xx responses and transport failures are turned into
ApiError with a message that can be shown to the admin directly.
"""
import threading
from typing import Any, Optional

import httpx

from core.config import API_BASE_URL, REQUEST_TIMEOUT
from core.errors import ApiError, AuthenticationError, FetchError
from core.session_manager import AdminSession


def handle_response(response: httpx.Response) -> Any:
    """Return the decoded body, or raise ApiError for a non-2xx status."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if not response.is_success:
        message = data.get("message") if isinstance(data, dict) else None
        raise ApiError(message or f"HTTP error! status: {response.status_code}", response.status_code)
    return data


class ApiClient:
    """
    Client for the admin REST API.

    Attributes:
        session: AdminSession providing the bearer token (None before login)
        base_url: API root, e.g. http://localhost:5000/api
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        session: Optional[AdminSession] = None,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        # the order form fetches from two threads at once
        with self._client_lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(
                    base_url=self.base_url,
                    timeout=self.timeout,
                    transport=self._transport,
                    headers={"Accept": "application/json"},
                )
            return self._client

    def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            self._client.close()
        self._client = None

    def _auth_headers(self) -> dict:
        if self.session is None or not self.session.is_active():
            raise AuthenticationError("Session expired. Please log in again.", 401)
        return self.session.auth_header()

    def request(self, method: str, path: str, json: Any = None, auth: bool = True) -> Any:
        headers = self._auth_headers() if auth else {}
        try:
            response = self._get_client().request(method, path, json=json, headers=headers)
        except httpx.TimeoutException:
            raise ApiError("Request timed out. Please try again.")
        except httpx.HTTPError as e:
            raise ApiError(f"Could not connect to the API: {e}")

        if response.status_code == 401 and auth and self.session is not None:
            # token rejected server-side: the session is over
            self.session.end()
        data = handle_response(response)
        if auth and self.session is not None:
            self.session.refresh()
        return data

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None, auth: bool = True) -> Any:
        return self.request("POST", path, json=json, auth=auth)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


def fetch_all(api: ApiClient, path: str, parse) -> list:
    """GET a collection and parse each record; failures become FetchError."""
    try:
        data = api.get(path)
    except ApiError as e:
        raise FetchError(e.message, e.status_code) from e
    if not isinstance(data, list):
        raise FetchError(f"Unexpected response from {path}")
    try:
        return [parse(item) for item in data]
    except (ValueError, ArithmeticError, TypeError, AttributeError) as e:
        print(f"Malformed record from {path}: {e!r}")
        raise FetchError(f"Unexpected response from {path}") from e
