"""Network registry: the fixed network -> backend table."""

from types import MappingProxyType
from typing import Mapping

from crossera.models import Network, NetworkConfig
from crossera.validation import validate_network

NETWORK_CONFIGS: Mapping[Network, NetworkConfig] = MappingProxyType({
    Network.TESTNET: NetworkConfig(
        base_url="https://crossera-testnet.vercel.app",
        chain_id=1144,
        name="CrossFi Testnet",
    ),
    Network.MAINNET: NetworkConfig(
        base_url="https://crossera.vercel.app",
        chain_id=1144,
        name="CrossFi Mainnet",
    ),
})


def get_network_config(network: str) -> NetworkConfig:
    """Get configuration for a network.

    Args:
        network: 'testnet' or 'mainnet'

    Returns:
        NetworkConfig for the network

    Raises:
        ValidationError: If the network is not recognized
    """
    validate_network(network)
    return NETWORK_CONFIGS[Network(network)]


def get_network_base_url(network: str) -> str:
    """Get the backend base URL for a network."""
    return get_network_config(network).base_url


def get_available_networks() -> list[Network]:
    """List recognized networks in declaration order."""
    return list(NETWORK_CONFIGS)
