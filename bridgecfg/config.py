"""Loading of the bridge service configuration."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from bridgecfg.network import NetworkConfig, network_config

logger = logging.getLogger(__name__)

ENV_PREFIX = "ZKEVM_BRIDGE"
NETWORK_SECTION = "NetworkConfig"
_BOOLS = {"1": True, "t": True, "true": True, "0": False, "f": False, "false": False}


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is inconsistent."""


@dataclass
class Config:
    """Loaded configuration: the file's sections and the network settings."""

    sections: dict[str, Any] = field(default_factory=dict)
    network_config: NetworkConfig = field(default_factory=NetworkConfig)

    def to_json(self) -> str:
        """Render the whole configuration as indented JSON."""
        return json.dumps({**self.sections, NETWORK_SECTION: self.network_config.as_dict()}, indent=2)


def _read_file(config_file_path: str) -> dict[str, Any]:
    path = Path(config_file_path)
    if not config_file_path or not path.is_file():
        logger.info("config file not found")
        return {}
    parsers = {"toml": tomllib.loads, "json": json.loads}
    kind = path.suffix.lstrip(".").lower()
    if kind not in parsers:
        raise ConfigError(f"unsupported config type: {kind!r}")
    try:
        data = parsers[kind](path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"error reading config file: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("config file must hold a table at the top level")
    return data


def _coerce(raw: str, current: Any) -> Any:
    text = raw.strip()
    try:
        if isinstance(current, bool):
            if text.lower() not in _BOOLS:
                raise ValueError(f"not a boolean: {raw!r}")
            return _BOOLS[text.lower()]
        if isinstance(current, int):
            return int(text, 0)
        if isinstance(current, float):
            return float(text)
    except ValueError as exc:
        raise ConfigError(f"invalid environment value: {exc}") from exc
    return raw.split() if isinstance(current, list) else raw


def _apply_env(node: dict[str, Any], environ: Mapping[str, str], prefix: str = ENV_PREFIX) -> None:
    for key, value in node.items():
        name = f"{prefix}_{key.replace('.', '_')}".upper()
        if isinstance(value, dict):
            _apply_env(value, environ, name)
        elif name in environ:
            node[key] = _coerce(environ[name], value)


def load(
    config_file_path: str = "",
    network: str = "",
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Read the configuration file, apply environment overrides and pick the network.

    The network comes either from the file's ``[NetworkConfig]`` section or
    from the ``network`` name, never both.
    """
    settings = _read_file(config_file_path)
    _apply_env(settings, os.environ if environ is None else environ)

    network_key = next((k for k in settings if k.lower() == NETWORK_SECTION.lower()), None)
    if network_key is not None and network:
        raise ConfigError(
            "Network details are provided in the config file (the [NetworkConfig] section) "
            "and as a flag (the --network or -n). Configure it only once and try again please."
        )
    if network_key is None and not network:
        raise ConfigError(
            "Network details are not provided. Please configure the [NetworkConfig] "
            "section in your config file, or provide a --network flag."
        )

    if network_key is None:
        selected = network_config(network)
    else:
        section = settings.pop(network_key)
        if not isinstance(section, dict):
            raise ConfigError("the NetworkConfig section must be a table")
        try:
            selected = NetworkConfig.from_mapping(section)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid NetworkConfig section: {exc}") from exc

    cfg = Config(sections=settings, network_config=selected)
    logger.info("Configuration loaded: \n%s\n", cfg.to_json())
    return cfg