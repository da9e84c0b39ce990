"""Per-network HTTP transport for the CrossEra backends.

One long-lived ``httpx.AsyncClient`` is built per network when the transport
is created. Every failed exchange is translated into an ``APIError``
subclass before it reaches calling code.
"""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

import httpx

from crossera.config import DEFAULT_TIMEOUT, EndpointConfig
from crossera.errors import (
    ConflictError,
    InternalConfigError,
    NotFoundError,
    RemoteError,
    RequestError,
    TransportError,
)
from crossera.models import Network, NetworkConfig
from crossera.networks import NETWORK_CONFIGS

logger = logging.getLogger(__name__)


def _response_data(response: httpx.Response) -> Any:
    """Parsed JSON body of an error response, or None."""
    try:
        return response.json()
    except ValueError:
        return None


def status_error(response: httpx.Response, network: Network) -> RemoteError:
    """Build the normalized error for a non-2xx response."""
    status = response.status_code
    data = _response_data(response)

    if status == 404:
        return NotFoundError(f"Resource not found on {network}", network, status, data)
    if status == 400:
        message = data.get("error") if isinstance(data, dict) else None
        if not isinstance(message, str) or not message:
            message = f"Bad request to {network}"
        return RemoteError(message, network, status, data)
    if status == 409:
        return ConflictError(
            "Transaction already submitted for batch processing", network, status, data
        )
    if status == 500:
        return RemoteError(f"Internal server error on {network}", network, status, data)
    return RemoteError(f"Request failed with status {status} on {network}", network, status, data)


class CrossEraAPIClient:
    """HTTP transport holding one configured client per network."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        api_key: Optional[str] = None,
        endpoints: Optional[EndpointConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            api_key: Optional API key sent as X-API-Key
            endpoints: REST paths (defaults to EndpointConfig())
            transport: Optional httpx transport shared by all clients
        """
        self.endpoints = endpoints or EndpointConfig()
        self._clients: Mapping[Network, httpx.AsyncClient] = MappingProxyType({
            network: self._create_client(config, timeout, api_key, transport)
            for network, config in NETWORK_CONFIGS.items()
        })

    @staticmethod
    def _create_client(
        config: NetworkConfig,
        timeout: float,
        api_key: Optional[str],
        transport: Optional[httpx.AsyncBaseTransport],
    ) -> httpx.AsyncClient:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["X-API-Key"] = api_key
        return httpx.AsyncClient(
            base_url=config.base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    def get_client(self, network: str) -> httpx.AsyncClient:
        """Get the client for a network.

        Raises:
            InternalConfigError: If no client was built for the network
        """
        try:
            client = self._clients.get(Network(network))
        except ValueError:
            client = None
        if client is None:
            raise InternalConfigError(f"No client found for network: {network}")
        return client

    async def request(
        self,
        network: Network,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json: Any = None,
    ) -> httpx.Response:
        """Send one request and return the 2xx response.

        Raises:
            APIError: Normalized failure (see ``crossera.errors``)
        """
        client = self.get_client(network)
        logger.debug(f"{method} {path} on {network}")

        try:
            response = await client.request(method, path, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = status_error(e.response, network)
            logger.warning(f"{method} {path} on {network} failed: {error.message}")
            raise error from e
        except (httpx.UnsupportedProtocol, httpx.InvalidURL, TypeError, ValueError) as e:
            logger.warning(f"{method} {path} on {network} could not be sent: {e}")
            raise RequestError(f"Error: {e}", network) from e
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} on {network} got no response: {type(e).__name__}")
            raise TransportError(f"Network error: Unable to reach {network}", network) from e
        except httpx.HTTPError as e:
            raise RequestError(f"Error: {e}", network) from e

        return response

    async def get_projects_by_owner(self, network: Network, owner: str) -> httpx.Response:
        """Look up projects registered by a wallet address."""
        return await self.request(
            network, "GET", self.endpoints.app_id_path, params={"owner": owner}
        )

    async def submit_transaction(self, network: Network, payload: dict) -> httpx.Response:
        """Submit a transaction for immediate processing."""
        return await self.request(network, "POST", self.endpoints.submit_path, json=payload)

    async def submit_for_processing(self, network: Network, payload: dict) -> httpx.Response:
        """Submit a transaction for batch processing."""
        return await self.request(network, "POST", self.endpoints.batch_submit_path, json=payload)

    async def get_transaction_status(self, network: Network, transaction_hash: str) -> httpx.Response:
        """Get batch processing status of a transaction."""
        return await self.request(
            network,
            "GET",
            self.endpoints.status_url(transaction_hash),
            params={"network": str(network)},
        )

    async def aclose(self) -> None:
        """Close all per-network clients."""
        for client in self._clients.values():
            await client.aclose()
