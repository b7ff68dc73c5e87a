"""Application configuration helpers."""

from __future__ import annotations

from .env import read_from_env, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .registry import (
    CLOUD_HOST,
    DEFAULT_GRAPHQL_ENDPOINT,
    RegistryConfig,
    get_destination_registry_config,
    get_source_registry_config,
    graphql_address,
)

__all__ = [
    "CLOUD_HOST",
    "DEFAULT_GRAPHQL_ENDPOINT",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "RegistryConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_destination_registry_config",
    "get_source_registry_config",
    "graphql_address",
    "read_from_env",
    "require_env_vars",
]
