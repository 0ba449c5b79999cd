"""Configuration loading (config) and network presets (network) for a bridge service."""

__version__ = "0.1.0"
__all__ = ["config", "network"]