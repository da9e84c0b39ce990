"""CrossEra SDK - app ID lookup and reward transaction submission.

Supported networks:
- testnet: CrossFi Testnet backend
- mainnet: CrossFi Mainnet backend
"""

from crossera.client import CrossEraAPIClient
from crossera.config import EndpointConfig, SDKConfig, Settings, get_settings
from crossera.errors import (
    APIError,
    ConflictError,
    CrossEraError,
    InternalConfigError,
    NotFoundError,
    RemoteError,
    RequestError,
    TransportError,
    ValidationError,
)
from crossera.models import (
    BatchInfo,
    BatchTransactionResult,
    CampaignMetric,
    Network,
    NetworkConfig,
    ProcessingStatus,
    TransactionMetrics,
    TransactionResult,
    TransactionStatus,
)
from crossera.networks import (
    NETWORK_CONFIGS,
    get_available_networks,
    get_network_base_url,
    get_network_config,
)
from crossera.sdk import CrossEraSDK
from crossera.validation import (
    is_valid_network,
    validate_address,
    validate_network,
    validate_transaction_hash,
)

__version__ = "1.0.0"

__all__ = [
    # Facade
    "CrossEraSDK",
    "CrossEraAPIClient",
    # Configuration
    "SDKConfig",
    "EndpointConfig",
    "Settings",
    "get_settings",
    # Networks
    "Network",
    "NetworkConfig",
    "NETWORK_CONFIGS",
    "get_network_config",
    "get_network_base_url",
    "get_available_networks",
    # Results
    "TransactionResult",
    "TransactionMetrics",
    "CampaignMetric",
    "BatchTransactionResult",
    "TransactionStatus",
    "BatchInfo",
    "ProcessingStatus",
    # Validation
    "validate_address",
    "validate_transaction_hash",
    "validate_network",
    "is_valid_network",
    # Errors
    "CrossEraError",
    "ValidationError",
    "InternalConfigError",
    "APIError",
    "RemoteError",
    "NotFoundError",
    "ConflictError",
    "TransportError",
    "RequestError",
]
