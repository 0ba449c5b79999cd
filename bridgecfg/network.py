"""Per-environment network settings for the bridge service."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x" + "00" * 20
DEFAULT_NETWORK = "mainnet"


def hex_to_address(value: str) -> str:
    """Turn a hex string into a 20-byte address in lower-case ``0x`` form.

    Longer inputs keep their last 20 bytes; shorter ones are left-padded with zeros.
    """
    text = value[2:] if value[:2] in ("0x", "0X") else value
    if not set(text) <= set(string.hexdigits):
        raise ValueError(f"invalid hex address: {value!r}")
    raw = bytes.fromhex(text.rjust(len(text) + len(text) % 2, "0"))
    return "0x" + raw[-20:].rjust(20, b"\0").hex()


_KEYS = {
    "GenBlockNumber": "gen_block_number",
    "PolygonZkEVMAddress": "polygon_zkevm_address",
    "PolygonBridgeAddress": "polygon_bridge_address",
    "PolygonZkEVMGlobalExitRootAddress": "polygon_zkevm_global_exit_root_address",
    "MaticTokenAddress": "matic_token_address",
    "L2PolygonBridgeAddresses": "l2_polygon_bridge_addresses",
    "L1ChainID": "l1_chain_id",
}


@dataclass(frozen=True)
class NetworkConfig:
    """Contract addresses and chain settings of one deployment."""

    gen_block_number: int = 0
    polygon_zkevm_address: str = ZERO_ADDRESS
    polygon_bridge_address: str = ZERO_ADDRESS
    polygon_zkevm_global_exit_root_address: str = ZERO_ADDRESS
    matic_token_address: str = ZERO_ADDRESS
    l2_polygon_bridge_addresses: tuple[str, ...] = ()
    l1_chain_id: int = 0

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if name.endswith("_address"):
                value = hex_to_address(value)
            elif name == "l2_polygon_bridge_addresses":
                items = value.split() if isinstance(value, str) else value
                value = tuple(hex_to_address(item) for item in items)
            else:
                value = int(value)
            object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> NetworkConfig:
        """Build a config from a ``[NetworkConfig]`` section; keys are case-insensitive."""
        attributes = {key.lower(): attribute for key, attribute in _KEYS.items()}
        return cls(**{attributes[k.lower()]: v for k, v in data.items() if k.lower() in attributes})

    def as_dict(self) -> dict[str, Any]:
        """Return the settings under their configuration file keys."""
        return {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in ((key, getattr(self, attribute)) for key, attribute in _KEYS.items())
        }


NETWORK_CONFIGS: Mapping[str, NetworkConfig] = MappingProxyType(
    {
        DEFAULT_NETWORK: NetworkConfig(
            16896718,
            "0x5132A183E9F3CB7C848b0AAC5Ae0c4f0491B7aB2",
            "0x2a3DD3EB832aF982ec71669E178424b10Dca2EDe",
            "0x580bda1e7A0CFAe92Fa7F6c20A3794F169CE3CFb",
            "0x7D1AfA7B718fb893dB30A3aBc0Cfc608AaCfeBB0",
            ("0x2a3DD3EB832aF982ec71669E178424b10Dca2EDe",),
            1,
        ),
        "testnet": NetworkConfig(
            8572995,
            "0xa997cfD539E703921fD1e3Cf25b4c241a27a4c7A",
            "0xF6BEEeBB578e214CA9E23B0e9683454Ff88Ed2A7",
            "0x4d9427DCA0406358445bC0a8F88C26b704004f74",
            "0x1319D23c2F7034F52Eb07399702B040bA278Ca49",
            ("0xF6BEEeBB578e214CA9E23B0e9683454Ff88Ed2A7",),
            5,
        ),
        "internaltestnet": NetworkConfig(
            7674349,
            "0x159113e5560c9CC2d8c4e716228CCf92c72E9603",
            "0x47c1090bc966280000Fe4356a501f1D0887Ce840",
            "0xA379Dd55Eb12e8FCdb467A814A15DE2b29677066",
            "0x94Ca2BbE1b469f25D3B22BDf17Fc80ad09E7F662",
            ("0xfC5b0c5F677a3f3E29DB2e98c9eD455c7ACfCf03",),
            5,
        ),
        "local": NetworkConfig(
            1,
            "0x610178dA211FEF7D417bC0e6FeD39F05609AD788",
            "0xff0EE8ea08cEf5cb4322777F5CC3E8A584B8A4A0",
            "0x2279B7A0a67DB372996a5FaB50D91eAA73d2eBe6",
            "0x5FbDB2315678afecb367f032d93F642f64180aa3",
            ("0xff0EE8ea08cEf5cb4322777F5CC3E8A584B8A4A0",),
            1337,
        ),
    }
)


def network_config(name: str) -> NetworkConfig:
    """Return the settings of a named network, falling back to mainnet."""
    if name in NETWORK_CONFIGS:
        logger.debug("Network '%s' selected", name)
        return NETWORK_CONFIGS[name]
    logger.debug("Network '%s' is invalid. Selecting %s instead.", name, DEFAULT_NETWORK)
    return NETWORK_CONFIGS[DEFAULT_NETWORK]