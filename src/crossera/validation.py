"""Input checks run before any request is sent."""

import re
from typing import Any

from crossera.errors import ValidationError
from crossera.models import Network

ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{40}")
TRANSACTION_HASH_PATTERN = re.compile(r"0x[a-fA-F0-9]{64}")

# Tuple, not set: str-Enum members hash by name, so membership must use equality
_NETWORK_VALUES = tuple(network.value for network in Network)


def validate_address(address: Any) -> None:
    """Validate an EVM wallet address (0x + 40 hex chars, any case).

    Raises:
        ValidationError: If the address is empty or malformed
    """
    if not address or not isinstance(address, str):
        raise ValidationError("Address must be a non-empty string")

    if not ADDRESS_PATTERN.fullmatch(address):
        raise ValidationError("Invalid Ethereum address format")


def validate_transaction_hash(transaction_hash: Any) -> None:
    """Validate a transaction hash (0x + 64 hex chars, any case).

    Raises:
        ValidationError: If the hash is empty or malformed
    """
    if not transaction_hash or not isinstance(transaction_hash, str):
        raise ValidationError("Transaction hash must be a non-empty string")

    if not TRANSACTION_HASH_PATTERN.fullmatch(transaction_hash):
        raise ValidationError("Invalid transaction hash format")


def is_valid_network(network: Any) -> bool:
    """Check whether ``network`` is exactly 'testnet' or 'mainnet'."""
    return isinstance(network, str) and network in _NETWORK_VALUES


def validate_network(network: Any) -> None:
    """Raise ValidationError unless ``network`` is a recognized network."""
    if not is_valid_network(network):
        raise ValidationError(f"Invalid network: {network}. Must be 'testnet' or 'mainnet'")
