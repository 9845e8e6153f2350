import json
import logging
from typing import Any

import httpx

from .exceptions import VaultAPIError, VaultResponseError
from .translator import EndpointRequest

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
API_ROOT = "/api"


class VaultAPIClient:
    """Client for making requests to the Obsidian Local REST API"""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client

        Args:
            base_url: Base URL of the vault server (the /api root is appended)
            api_key: Optional bearer token (with or without "Bearer" prefix)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests to stand in for the vault)
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_ROOT}"

        # Normalize token - ensure it has "Bearer" prefix
        # Handle both formats: "Bearer token" and "token"
        if not api_key:
            self.token = None
        elif api_key.startswith(BEARER_PREFIX):
            self.token = api_key
        else:
            self.token = f"{BEARER_PREFIX}{api_key}"

        self.timeout = timeout
        self._transport = transport

    def _get_headers(self) -> dict[str, str]:
        """Get request headers, with authentication when a token is configured"""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.token:
            headers["Authorization"] = self.token
        return headers

    async def execute(self, request: EndpointRequest) -> Any:
        """
        Send one request to the vault API

        Args:
            request: Method, path, query parameters and body to send

        Returns:
            Parsed JSON response from the API

        Raises:
            VaultAPIError: If the API answers with a status outside 200-299
            VaultResponseError: If the response body is not valid JSON
            httpx.HTTPError: If the request cannot be sent
        """
        url = f"{self.api_url}{request.path}"

        logger.info(f"Vault API request: {request.method} {request.path}")
        if request.params:
            logger.debug(f"   Parameters: {request.params}")

        async with httpx.AsyncClient(
            follow_redirects=True,
            http2=True,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(
                request.method,
                url,
                params=request.params or None,
                json=request.json_body,
                headers=self._get_headers(),
            )

        if not response.is_success:
            logger.warning(f"❌ Response: {response.status_code} {response.reason_phrase} for {request.method} {request.path}")
            raise VaultAPIError(response.status_code, response.reason_phrase)

        try:
            response_data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise VaultResponseError(f"Invalid JSON in API response from {request.method} {request.path}: {e}") from e

        logger.info(f"✅ Response: {response.status_code}")

        if isinstance(response_data, list):
            logger.info(f"   Items returned: {len(response_data)}")

        return response_data
