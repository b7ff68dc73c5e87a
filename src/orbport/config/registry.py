"""Orb registry connection settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final
from urllib.parse import urljoin, urlparse

from .env import env_var_name, read_from_env, require_env_vars
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

CLOUD_HOST: Final[str] = "https://circleci.com"
DEFAULT_GRAPHQL_ENDPOINT: Final[str] = "graphql-unstable"
REGISTRY_TIMEOUT_SECONDS: Final[float] = 30.0


def graphql_address(host: str, endpoint: str) -> str:
    """Resolve ``endpoint`` against ``host``.

    An absolute endpoint wins over the host, so older settings that carried the
    full GraphQL URL in the endpoint keep working.
    """

    if not urlparse(host).scheme:
        raise ConfigurationError(f"Host ({host}) must be absolute URL, including scheme")
    base = host if host.endswith("/") else f"{host}/"
    return urljoin(base, endpoint)


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Connection settings for one orb registry."""

    host: str
    endpoint: str = DEFAULT_GRAPHQL_ENDPOINT
    token: str | None = None
    debug: bool = False
    resilience: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(name="registry")
    )

    @property
    def address(self) -> str:
        return graphql_address(self.host, self.endpoint)


def _resilience(name: str, *, ratelimit: RateLimit | None = None) -> ResilienceConfig:
    return ResilienceConfig(
        name=name,
        timeout_seconds=REGISTRY_TIMEOUT_SECONDS,
        retry=RetryPolicy(),
        ratelimit=ratelimit,
    )


def get_source_registry_config(*, debug: bool = False) -> RegistryConfig:
    """Settings for the public cloud registry orbs are copied from.

    Reads are anonymous, so no token is sent even if one is configured for the
    destination.
    """

    return RegistryConfig(
        host=CLOUD_HOST,
        endpoint=DEFAULT_GRAPHQL_ENDPOINT,
        debug=debug,
        resilience=_resilience(
            "source-registry",
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        ),
    )


def get_destination_registry_config(
    *,
    host: str | None = None,
    token: str | None = None,
    debug: bool = False,
) -> RegistryConfig:
    """Settings for the registry orbs are copied into.

    Explicit arguments win over ``CIRCLECI_CLI_HOST`` / ``CIRCLECI_CLI_ENDPOINT`` /
    ``CIRCLECI_CLI_TOKEN``. A token is required because every import is a mutation.
    """

    effective_host = host or read_from_env("host") or CLOUD_HOST
    endpoint = read_from_env("endpoint") or DEFAULT_GRAPHQL_ENDPOINT
    effective_token = token or read_from_env("token")
    if effective_token is None:
        token_var = env_var_name("token")
        effective_token = require_env_vars((token_var,))[token_var]

    config = RegistryConfig(
        host=effective_host,
        endpoint=endpoint,
        token=effective_token,
        debug=debug,
        resilience=_resilience("destination-registry"),
    )
    # fail early on a relative host instead of on the first request
    _ = config.address
    return config
