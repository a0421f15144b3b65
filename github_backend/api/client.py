"""
GitHub API client for making authenticated requests.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from common.config.config import (
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GITHUB_CONNECT_TIMEOUT,
    GITHUB_REQUEST_TIMEOUT,
)
from common.exception.exceptions import HttpError, TransportError

logger = logging.getLogger(__name__)


class GitHubAPIClient:
    """Client for GitHub API interactions authenticated with a bearer token."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
    ):
        """Initialize GitHub API client.

        Args:
            token: GitHub access token
            base_url: API base URL (defaults to config)
            api_version: Value of the X-GitHub-Api-Version header (defaults to config)
            timeout: Request timeout in seconds (defaults to config)
            connect_timeout: Connect timeout in seconds (defaults to config)
        """
        self.token = token
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self.api_version = api_version or GITHUB_API_VERSION
        self.timeout = timeout if timeout is not None else GITHUB_REQUEST_TIMEOUT
        self.connect_timeout = (
            connect_timeout if connect_timeout is not None else GITHUB_CONNECT_TIMEOUT
        )

        if not token:
            logger.warning("GitHub API client initialized without a token - authentication may fail")

    def _get_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Get headers for GitHub API requests.

        Args:
            extra: Headers overriding the defaults (e.g. a raw Accept type)

        Returns:
            Headers dictionary
        """
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.api_version,
            "Content-Type": "application/json",
            "Cache-Control": "no-cache",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if extra:
            headers.update(extra)
        return headers

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make a GitHub API request and return the parsed JSON body.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: API path (without base URL)
            data: Request body data
            params: Query parameters
            headers: Extra request headers

        Returns:
            Parsed JSON response (dict or list), or an empty dict for empty bodies

        Raises:
            TransportError: If the request fails at the network level
            HttpError: If the response status is not 2xx
        """
        url = self._url(path)
        response = await self._send(method, url, data, params, headers)
        return self._process_response(response, method, url)

    async def request_raw(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        accept: str = "application/vnd.github.raw",
    ) -> bytes:
        """Make a GET request and return the raw response body.

        Args:
            path: API path (without base URL)
            params: Query parameters
            accept: Media type requested from the API

        Returns:
            Response content as bytes
        """
        url = self._url(path)
        response = await self._send("GET", url, None, params, {"Accept": accept})
        self._raise_for_status(response, "GET", url)
        return response.content

    async def _send(
        self,
        method: str,
        url: str,
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
        headers: Optional[Dict[str, str]],
    ) -> httpx.Response:
        timeout_config = httpx.Timeout(self.timeout, connect=self.connect_timeout)
        try:
            return await self._execute_http_request(
                method, url, self._get_headers(headers), data, params, timeout_config
            )
        except httpx.RequestError as e:
            error_msg = f"GitHub API request error: {e}"
            logger.error(error_msg)
            raise TransportError(error_msg) from e

    async def _execute_http_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
        timeout_config: httpx.Timeout,
    ) -> httpx.Response:
        """Execute HTTP request with method routing.

        Raises:
            ValueError: If HTTP method is unsupported
        """
        method_upper = method.upper()

        async with httpx.AsyncClient(timeout=timeout_config, trust_env=False) as client:
            if method_upper == "GET":
                return await client.get(url, headers=headers, params=params)
            elif method_upper == "POST":
                return await client.post(url, json=data, headers=headers, params=params)
            elif method_upper == "PUT":
                return await client.put(url, json=data, headers=headers, params=params)
            elif method_upper == "DELETE":
                return await client.delete(url, headers=headers, params=params)
            elif method_upper == "PATCH":
                return await client.patch(url, json=data, headers=headers, params=params)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

    def _raise_for_status(self, response: httpx.Response, method: str, url: str) -> None:
        if 200 <= response.status_code < 300:
            logger.info(
                f"GitHub API {method} request to {url} "
                f"successful (status: {response.status_code})"
            )
            return

        logger.error(
            f"GitHub API {method} request to {url} failed "
            f"(status {response.status_code}): {response.text}"
        )
        raise HttpError(response.status_code, response.text, url)

    def _process_response(self, response: httpx.Response, method: str, url: str) -> Any:
        """Check the response status and extract the JSON body.

        Raises:
            HttpError: If response status indicates failure
        """
        self._raise_for_status(response, method, url)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            logger.warning(f"GitHub API {method} response from {url} is not JSON")
            return {}

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make a GET request."""
        return await self.request("GET", path, params=params, headers=headers)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """Make a POST request."""
        return await self.request("POST", path, data=data)

    async def patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        """Make a PATCH request."""
        return await self.request("PATCH", path, data=data)
