"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: get_config_provider(), EnvConfigProvider, StaticConfigProvider
Hidden: Environment parsing, defaults, validation

Can be replaced with any object satisfying the ConfigProvider protocol.
"""

from typing import Optional

from .provider import (
    DEFAULT_API_ROOT,
    APIConfig,
    AuthConfig,
    ConfigProvider,
    EnvConfigProvider,
    StaticConfigProvider,
    normalize_api_root,
)

# Singleton instance
_instance: Optional[ConfigProvider] = None


def get_config_provider() -> ConfigProvider:
    """Get the process-wide configuration provider."""
    global _instance
    if _instance is None:
        _instance = EnvConfigProvider()
    return _instance


__all__ = [
    "DEFAULT_API_ROOT",
    "APIConfig",
    "AuthConfig",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "get_config_provider",
    "normalize_api_root",
]
