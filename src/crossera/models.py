"""Data contracts shared by the SDK.

Result records mirror the JSON bodies returned by the CrossEra backends.
Attributes are snake_case in Python and camelCase on the wire, so
``model_dump(by_alias=True)`` gives back the server shape. Fields the
server adds later are kept rather than dropped.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Network(str, Enum):
    """Deployment targets served by CrossEra."""

    TESTNET = "testnet"
    MAINNET = "mainnet"

    def __str__(self) -> str:
        return self.value


class ProcessingStatus(str, Enum):
    """Batch processing state of a submitted transaction."""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"

    def __str__(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        """Whether the backend will not touch the transaction again."""
        return self in (ProcessingStatus.COMPLETED, ProcessingStatus.FAILED, ProcessingStatus.SKIPPED)


class NetworkConfig(BaseModel):
    """Static connection details for one network."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., description="Backend base URL")
    chain_id: Optional[int] = Field(None, description="EVM chain ID")
    name: str = Field(..., description="Display name")


class _WireModel(BaseModel):
    # Numeric amounts are kept as decimal strings even when sent as JSON numbers
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )


class TransactionMetrics(_WireModel):
    """On-chain figures for a processed transaction (decimal strings)."""

    gas_used: str = "0"
    gas_price: str = "0"
    fee_generated: str = "0"
    transaction_value: str = "0"


class CampaignMetric(_WireModel):
    """Per-campaign totals after a transaction was credited."""

    campaign_id: Union[int, str]
    total_fees: str = "0"
    total_volume: str = "0"
    tx_count: int = 0
    estimated_reward: str = "0"


class TransactionResult(_WireModel):
    """Result of immediate (synchronous) transaction processing."""

    success: bool = True
    transaction_hash: str
    app_id: Optional[str] = None
    processed_at: Optional[str] = None
    network: Network
    metrics: Optional[TransactionMetrics] = Field(default_factory=TransactionMetrics)
    campaigns_updated: int = 0
    campaign_metrics: Optional[list[CampaignMetric]] = Field(default_factory=list)


class BatchTransactionResult(_WireModel):
    """Acknowledgement of a transaction queued for batch processing."""

    success: bool = True
    transaction_hash: str
    app_id: Optional[str] = ""
    user_address: Optional[str] = ""
    status: ProcessingStatus = ProcessingStatus.PENDING
    submitted_at: Optional[str] = None
    estimated_processing_time: Optional[str] = None
    id: Optional[Union[int, str]] = None
    network: Network


class BatchInfo(_WireModel):
    """Backend batch that picked up a transaction."""

    id: Optional[Union[int, str]] = None
    started_at: Optional[str] = None
    completed_at: Optional[str] = None
    status: Optional[str] = None


class TransactionStatus(BatchTransactionResult):
    """Current processing state of a batch-submitted transaction."""

    network: Optional[Network] = None
    processed_at: Optional[str] = None
    process_tx_hash: Optional[str] = None
    retry_count: int = 0
    max_retries: int = 0
    error_message: Optional[str] = None
    batch_info: Optional[BatchInfo] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def can_retry(self) -> bool:
        """Whether a failed transaction still has backend retries left."""
        return self.status == ProcessingStatus.FAILED and self.retry_count < self.max_retries
