"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

DEFAULT_API_ROOT = "/api/v1/InvoiceWS"
MIN_HASH_ITERATIONS = 1000


@dataclass(frozen=True)
class APIConfig:
    """API configuration."""
    host: str
    port: int
    debug: bool
    log_level: str
    api_root: str

    @property
    def health_path(self) -> str:
        """Path of the unauthenticated health check."""
        return f"{self.api_root}/health"


@dataclass(frozen=True)
class AuthConfig:
    """Authentication configuration."""
    realm: str
    hash_iterations: int


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...

    def get_auth_config(self) -> AuthConfig:
        """Get authentication configuration."""
        ...


def normalize_api_root(raw: Optional[str]) -> str:
    """
    Normalize an API root to a leading slash and no trailing slash.

    An empty value (or "/") mounts the routes at the server root.
    """
    root = (raw or "").strip().strip("/")
    return f"/{root}" if root else ""


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=_env_int("API_PORT", 8080),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            api_root=normalize_api_root(os.getenv("SINVOICE_API_ROOT", DEFAULT_API_ROOT)),
        )

    def get_auth_config(self) -> AuthConfig:
        """Get authentication configuration from environment variables."""
        return AuthConfig(
            realm=os.getenv("AUTH_REALM", "SInvoice Mock"),
            hash_iterations=_env_int(
                "AUTH_HASH_ITERATIONS", 100_000, minimum=MIN_HASH_ITERATIONS
            ),
        )


class StaticConfigProvider:
    """Fixed configuration provider, used by tests and embedding callers."""

    def __init__(self, api_config: APIConfig, auth_config: AuthConfig):
        self._api_config = api_config
        self._auth_config = auth_config

    def get_api_config(self) -> APIConfig:
        return self._api_config

    def get_auth_config(self) -> AuthConfig:
        return self._auth_config
