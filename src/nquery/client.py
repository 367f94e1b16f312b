"""HTTP client for the Nomad API.

Issues single GET requests against ``{address}/v1/{resource}`` and classifies
the outcome as a transport failure, an HTTP error status or decoded JSON.
"""

import logging
from typing import Any, Optional

import httpx

from .config import QueryConfig
from .exceptions import NomadConnectionError, NomadDecodeError, NomadHTTPError

logger = logging.getLogger(__name__)

API_PREFIX = "v1"


class NomadClient:
    """Read-only HTTP client for one Nomad cluster.

    No retries and no timeout override: each ``get`` is one request with the
    transport defaults.
    """

    def __init__(self, config: QueryConfig, client: Optional[httpx.Client] = None):
        """Initialize the Nomad client.

        Args:
            config: Query configuration holding the base address
            client: Optional pre-built httpx client (used by tests)
        """
        self.config = config
        self.address = config.address.rstrip("/")
        self._client: Optional[httpx.Client] = client

    def connect(self) -> None:
        """Initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client()

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "NomadClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def url_for(self, resource: str) -> str:
        """Build the full URL for an API resource path."""
        return f"{self.address}/{API_PREFIX}/{resource.lstrip('/')}"

    def get(self, resource: str) -> Any:
        """Issue an HTTP GET against the given resource.

        Args:
            resource: Path of the resource relative to the API prefix,
                e.g. ``jobs?prefix=web`` or ``job/example``

        Returns:
            The decoded JSON body

        Raises:
            NomadConnectionError: The configured address could not be reached
            NomadHTTPError: The server answered with a non-2xx status
            NomadDecodeError: A 2xx response body was not valid JSON
        """
        if not self._client:
            self.connect()

        url = self.url_for(resource)

        try:
            response = self._client.get(url)
        except httpx.TransportError as e:
            logger.debug(f"Request <{url}> failed: {e}")
            raise NomadConnectionError(self.address) from e

        logger.debug(f"Response <{url}> [{response.status_code}]")

        if not response.is_success:
            raise NomadHTTPError(response.status_code, response.text.strip())

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Unreadable body from <{url}>: {e}")
            raise NomadDecodeError() from e
