"""Shared HTTP plumbing for the remote content API.

Every content API response is a JSON envelope ``{success, data, message}``.
"""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class ContentApiError(Exception):
    """Raised when the content API cannot be reached or answers with an error.

    Attributes:
        status_code: HTTP status, None for transport failures
        server_message: Message from the response envelope, if any
    """

    def __init__(self, message: str, status_code: Optional[int] = None, server_message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message


class ContentApiClient:
    """Thin httpx wrapper bound to the content API base URL.

    Args:
        base_url: API base URL, e.g. "https://api.example.com/api"
        timeout: Request timeout in seconds
        client: Pre-built httpx.Client (tests pass one with a MockTransport)
        owns_client: Close the client in close(); defaults to True only
            when the client is created here
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
        owns_client: Optional[bool] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None if owns_client is None else owns_client
        self.client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def request_json(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        """Send a request and return the decoded JSON envelope.

        Raises:
            ContentApiError: On transport errors, non-2xx responses,
                non-JSON bodies or envelopes that aren't objects
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise ContentApiError(f"Timeout calling {method} {url}") from e
        except httpx.RequestError as e:
            raise ContentApiError(f"Network error calling {method} {url}: {type(e).__name__}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code >= 400:
            server_message = body.get("message") if isinstance(body, dict) else None
            raise ContentApiError(
                f"HTTP {response.status_code} from {method} {url}",
                status_code=response.status_code,
                server_message=server_message if isinstance(server_message, str) else None,
            )

        if not isinstance(body, dict):
            raise ContentApiError(f"Invalid JSON envelope from {method} {url}", status_code=response.status_code)

        return body
