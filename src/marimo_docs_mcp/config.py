"""Runtime configuration for marimo docs MCP server."""

from dataclasses import dataclass
import os

DEFAULT_BASE_URL = "https://docs.marimo.io/api"
DEFAULT_REQUEST_TIMEOUT_S = 30.0
DEFAULT_CACHE_TTL_S = 60 * 60


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class DocsConfig:
    base_url: str
    request_timeout_s: float
    cache_ttl_s: float
    log_level: str


def get_docs_config() -> DocsConfig:
    """Load documentation proxy config from environment variables."""
    return DocsConfig(
        base_url=_env_str("MARIMO_DOCS_BASE_URL", DEFAULT_BASE_URL),
        request_timeout_s=max(1.0, _env_float("MARIMO_DOCS_REQUEST_TIMEOUT_S", DEFAULT_REQUEST_TIMEOUT_S)),
        cache_ttl_s=_env_float("MARIMO_DOCS_CACHE_TTL_S", DEFAULT_CACHE_TTL_S),
        log_level=_env_str("MARIMO_DOCS_LOG_LEVEL", "WARNING").upper(),
    )
