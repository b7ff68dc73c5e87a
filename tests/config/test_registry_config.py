from __future__ import annotations

import pytest

from orbport.config import (
    CLOUD_HOST,
    ConfigurationError,
    MissingConfigurationError,
    RateLimit,
    get_destination_registry_config,
    get_source_registry_config,
    graphql_address,
)


@pytest.mark.parametrize(
    ("host", "endpoint", "expected"),
    [
        ("https://circleci.com", "graphql-unstable", "https://circleci.com/graphql-unstable"),
        ("https://orbs.test/", "graphql-unstable", "https://orbs.test/graphql-unstable"),
        ("https://orbs.example.com/api", "graphql", "https://orbs.example.com/api/graphql"),
        ("https://orbs.test", "https://other.test/gql", "https://other.test/gql"),
    ],
)
def test_graphql_address(host: str, endpoint: str, expected: str) -> None:
    assert graphql_address(host, endpoint) == expected


def test_graphql_address_requires_scheme() -> None:
    with pytest.raises(ConfigurationError, match="must be absolute URL"):
        graphql_address("orbs.example.com", "graphql-unstable")


def test_source_registry_config_targets_cloud_anonymously(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CIRCLECI_CLI_HOST", "https://orbs.example.com")
    monkeypatch.setenv("CIRCLECI_CLI_TOKEN", "secret")

    config = get_source_registry_config(debug=True)

    assert config.host == CLOUD_HOST
    assert config.token is None
    assert config.debug is True
    assert config.address == "https://circleci.com/graphql-unstable"
    assert config.resilience.ratelimit == RateLimit(max_calls=10, per_seconds=1.0)


@pytest.mark.usefixtures("clear_registry_env")
def test_destination_registry_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CIRCLECI_CLI_HOST", "https://orbs.example.com")
    monkeypatch.setenv("CIRCLECI_CLI_ENDPOINT", "graphql")
    monkeypatch.setenv("CIRCLECI_CLI_TOKEN", "env-token")

    config = get_destination_registry_config()

    assert config.address == "https://orbs.example.com/graphql"
    assert config.token == "env-token"
    assert config.debug is False


@pytest.mark.usefixtures("clear_registry_env")
def test_destination_registry_config_arguments_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CIRCLECI_CLI_HOST", "https://env.example.com")
    monkeypatch.setenv("CIRCLECI_CLI_TOKEN", "env-token")

    config = get_destination_registry_config(
        host="https://flag.example.com",
        token="flag-token",
        debug=True,
    )

    assert config.host == "https://flag.example.com"
    assert config.token == "flag-token"
    assert config.debug is True


@pytest.mark.usefixtures("clear_registry_env")
def test_destination_registry_config_defaults_to_cloud_host() -> None:
    config = get_destination_registry_config(token="t")

    assert config.address == "https://circleci.com/graphql-unstable"


@pytest.mark.usefixtures("clear_registry_env")
def test_destination_registry_config_requires_token() -> None:
    with pytest.raises(MissingConfigurationError, match="CIRCLECI_CLI_TOKEN"):
        get_destination_registry_config(host="https://orbs.example.com")


@pytest.mark.usefixtures("clear_registry_env")
def test_destination_registry_config_rejects_relative_host() -> None:
    with pytest.raises(ConfigurationError, match="must be absolute URL"):
        get_destination_registry_config(host="orbs.example.com", token="t")
