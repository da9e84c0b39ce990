"""CrossEra SDK facade.

Each operation validates its inputs, sends exactly one request through
``CrossEraAPIClient`` and reshapes the JSON body into a result model.
Two failures are absorbed rather than raised:

- 404 on the app ID lookup returns ``None``
- 409 on batch submission returns a pending acknowledgement
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from crossera.client import CrossEraAPIClient
from crossera.config import SDKConfig, get_settings
from crossera.errors import APIError, ConflictError, NotFoundError, RemoteError
from crossera.models import (
    BatchTransactionResult,
    Network,
    NetworkConfig,
    ProcessingStatus,
    TransactionResult,
    TransactionStatus,
)
from crossera.networks import get_available_networks, get_network_config
from crossera.validation import validate_address, validate_network, validate_transaction_hash

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

BATCH_PROCESSING_ESTIMATE = "24 hours"


def _utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with milliseconds and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _json_body(response: httpx.Response, network: Network) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise RemoteError(
            f"Invalid response from {network}: body is not JSON",
            network,
            response.status_code,
        ) from e


def _parse(model: type[ModelT], data: Any, network: Network, status: Optional[int]) -> ModelT:
    try:
        return model.model_validate(data)
    except ModelValidationError as e:
        raise RemoteError(
            f"Invalid response from {network}: {e.error_count()} field error(s)",
            network,
            status,
            data,
        ) from e


def _payload(body: Any, transaction_hash: str) -> dict:
    """The ``data`` object of a response body, or an empty dict.

    The transaction hash is filled in when the server leaves it out.
    """
    if isinstance(body, dict) and isinstance(body.get("data"), dict):
        return {"transactionHash": transaction_hash, **body["data"]}
    return {}


class CrossEraSDK:
    """Client for the CrossEra reward backends.

    Example:
        async with CrossEraSDK() as sdk:
            app_id = await sdk.get_app_id_by_address(
                address="0x46992B61b7A1d2e4F59Cd881B74A96a549EF49BF",
                network="testnet",
            )
    """

    def __init__(
        self,
        config: Optional[SDKConfig] = None,
        *,
        api_client: Optional[CrossEraAPIClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the SDK.

        Args:
            config: SDK options (defaults to values from the environment)
            api_client: Pre-built transport, mainly for tests
            transport: httpx transport for the default api_client
        """
        self.config = config or SDKConfig.from_settings(get_settings())
        self.default_network = self.config.default_network
        self.api_client = api_client or CrossEraAPIClient(
            timeout=self.config.timeout,
            api_key=self.config.api_key,
            endpoints=self.config.endpoints,
            transport=transport,
        )

    async def __aenter__(self) -> "CrossEraSDK":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP clients."""
        await self.api_client.aclose()

    def _resolve_network(self, network: Optional[str]) -> Network:
        if network is None:
            network = self.default_network
        validate_network(network)
        return Network(network)

    async def get_app_id_by_address(
        self, address: str, network: Optional[str] = None
    ) -> Optional[str]:
        """Get the app ID registered by a wallet address.

        Args:
            address: Wallet address (0x + 40 hex chars)
            network: 'testnet' or 'mainnet' (defaults to config.default_network)

        Returns:
            App ID of the first registered project, or None if there is none

        Raises:
            ValidationError: If address or network is malformed
            APIError: If the request fails for any reason other than 404
        """
        validate_address(address)
        network = self._resolve_network(network)

        try:
            response = await self.api_client.get_projects_by_owner(network, address)
            body = _json_body(response, network)
        except NotFoundError:
            logger.info(f"No projects for {address} on {network}")
            return None
        except APIError as e:
            raise e.with_message(
                f"Failed to get app ID for address {address} on {network}: {e.message}"
            ) from e

        if isinstance(body, dict) and body.get("success"):
            projects = body.get("projects") or []
            if projects and isinstance(projects[0], dict):
                return projects[0].get("app_id") or None
        return None

    async def submit_transaction(
        self, transaction_hash: str, network: Optional[str] = None
    ) -> TransactionResult:
        """Submit a transaction for immediate reward processing.

        The backend processes the transaction before answering.

        Args:
            transaction_hash: Transaction hash (0x + 64 hex chars)
            network: 'testnet' or 'mainnet' (defaults to config.default_network)

        Returns:
            TransactionResult from the backend, tagged with the network

        Raises:
            ValidationError: If hash or network is malformed
            APIError: If the request fails
        """
        validate_transaction_hash(transaction_hash)
        network = self._resolve_network(network)

        try:
            response = await self.api_client.submit_transaction(
                network, {"transaction_hash": transaction_hash}
            )
            data = _payload(_json_body(response, network), transaction_hash)
            return _parse(
                TransactionResult, {**data, "network": network}, network, response.status_code
            )
        except APIError as e:
            raise e.with_message(
                f"Failed to submit transaction {transaction_hash} on {network}: {e.message}"
            ) from e

    async def submit_for_processing(
        self,
        transaction_hash: str,
        network: Optional[str] = None,
        app_id: Optional[str] = None,
        user_address: Optional[str] = None,
    ) -> BatchTransactionResult:
        """Queue a transaction for batch reward processing.

        Resubmitting a queued transaction is not an error: the backend's 409
        answer is returned as a pending acknowledgement.

        Args:
            transaction_hash: Transaction hash (0x + 64 hex chars)
            network: 'testnet' or 'mainnet' (defaults to config.default_network)
            app_id: Optional app ID; inferred by the backend when omitted
            user_address: Optional user address; inferred when omitted

        Returns:
            BatchTransactionResult tagged with the network

        Raises:
            ValidationError: If hash or network is malformed
            APIError: If the request fails with anything other than 409
        """
        validate_transaction_hash(transaction_hash)
        network = self._resolve_network(network)

        payload = {"transaction_hash": transaction_hash}
        if app_id:
            payload["app_id"] = app_id
        if user_address:
            payload["user_address"] = user_address

        try:
            response = await self.api_client.submit_for_processing(network, payload)
            data = _payload(_json_body(response, network), transaction_hash)
            return _parse(
                BatchTransactionResult, {**data, "network": network}, network, response.status_code
            )
        except APIError as e:
            if isinstance(e, ConflictError) or "already submitted" in e.message:
                return self._already_submitted(e, transaction_hash, network)
            raise e.with_message(
                f"Failed to submit transaction {transaction_hash} for processing "
                f"on {network}: {e.message}"
            ) from e

    def _already_submitted(
        self, error: APIError, transaction_hash: str, network: Network
    ) -> BatchTransactionResult:
        logger.info(f"Transaction {transaction_hash} already queued on {network}")
        data = _payload(error.response_data, transaction_hash)
        if data:
            try:
                return _parse(
                    BatchTransactionResult, {**data, "network": network}, network, error.status
                )
            except RemoteError as e:
                logger.warning(f"Ignoring unreadable conflict payload for {transaction_hash}: {e}")
        return BatchTransactionResult(
            success=True,
            transaction_hash=transaction_hash,
            app_id="",
            user_address="",
            status=ProcessingStatus.PENDING,
            submitted_at=_utc_timestamp(),
            estimated_processing_time=BATCH_PROCESSING_ESTIMATE,
            network=network,
        )

    async def get_transaction_status(
        self, transaction_hash: str, network: Optional[str] = None
    ) -> TransactionStatus:
        """Get the batch processing status of a transaction.

        Raises:
            ValidationError: If hash or network is malformed
            APIError: If the request fails
        """
        validate_transaction_hash(transaction_hash)
        network = self._resolve_network(network)

        try:
            response = await self.api_client.get_transaction_status(network, transaction_hash)
            data = _payload(_json_body(response, network), transaction_hash)
            return _parse(TransactionStatus, data, network, response.status_code)
        except APIError as e:
            raise e.with_message(
                f"Failed to get status for transaction {transaction_hash} "
                f"on {network}: {e.message}"
            ) from e

    def get_network_config(self, network: str) -> NetworkConfig:
        """Get configuration for a network."""
        validate_network(network)
        return get_network_config(network)

    def get_available_networks(self) -> list[Network]:
        """List available networks."""
        return get_available_networks()
