# The module is to define the client for the UseKeen package search API.
# Date: 2026-10-19
# Version: 0.1.0

import httpx
from typing import Any, Dict, Optional
from usekeen_mcp.core.config import DEFAULT_BASE_URL
from usekeen_mcp.core.exceptions import BackendHttpError, BackendNetworkError, BackendResponseError
from usekeen_mcp.models.common import to_json_text
from usekeen_mcp.utils.logger import console

DOC_SEARCH_PATH = "/tools/package_doc_search"
PACKAGE_SEARCH_PATH = "/packages/search"

_REDACTED = "REDACTED"

class UseKeenClient:
    """
    Client for the UseKeen API. Handles authentication and request/response handling.

    The API key and base URL are fixed at construction. Every call opens its own
    httpx.AsyncClient, so one instance can serve concurrent tool calls.
    No retries are performed.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL,
                 timeout: float = 60.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            api_key: The API key for authenticating with the UseKeen API.
            base_url: Root URL of the UseKeen API.
            timeout: Timeout in seconds applied to each request.
            transport: Optional httpx transport, used to stub the network in tests.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_documentation(self, package_name: str, query: str = "") -> Any:
        """
        Searches the documentation of a package or service.
        Args:
            package_name: The name of the package to search for.
            query: Search term to find specific information. Sent as "" when empty.
        Returns:
            The parsed JSON body of the UseKeen API response.
        """
        params = {"api_key": self._api_key}
        body = {"package_name": package_name, "query": query or ""}
        return await self._request("POST", DOC_SEARCH_PATH, params=params, json_body=body)

    async def fetch_packages(self, query: str, max_results: int = 10) -> Any:
        """
        Searches for packages by name or description.
        Args:
            query: The search query to find relevant packages.
            max_results: Maximum number of packages to return.
        Returns:
            The parsed JSON body of the UseKeen API response.
        """
        params = {"api_key": self._api_key, "q": query, "max_results": str(max_results)}
        return await self._request("GET", PACKAGE_SEARCH_PATH, params=params)

    async def _request(self, method: str, path: str, params: Dict[str, str],
                       json_body: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self._base_url}{path}"

        console.info(f"API Request URL: {self._redacted_url(url, params)}")
        if json_body is not None:
            console.info(f"API Request Body: {to_json_text(json_body)}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TransportError as e:
            console.error(f"Error calling UseKeen API at {path}: {e!r}")
            raise BackendNetworkError(e) from e

        if not response.is_success:
            console.error(f"UseKeen API returned {response.status_code} for {path}")
            raise BackendHttpError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            console.error(f"UseKeen API returned a non-JSON body for {path}")
            raise BackendResponseError(str(e)) from e

    @staticmethod
    def _redacted_url(url: str, params: Dict[str, str]) -> str:
        redacted = dict(params)
        if "api_key" in redacted:
            redacted["api_key"] = _REDACTED
        return str(httpx.URL(url, params=redacted))
