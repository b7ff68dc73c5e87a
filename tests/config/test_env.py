from __future__ import annotations

import pytest

from orbport.config.env import env_var_name, read_from_env, require_env_vars
from orbport.config.errors import MissingConfigurationError


def test_env_var_name_uses_prefix() -> None:
    assert env_var_name("token") == "CIRCLECI_CLI_TOKEN"
    assert env_var_name("host", prefix="other") == "OTHER_HOST"


def test_read_from_env_strips_and_treats_blank_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CIRCLECI_CLI_HOST", "  https://orbs.example.com ")
    monkeypatch.setenv("CIRCLECI_CLI_ENDPOINT", "   ")
    monkeypatch.delenv("CIRCLECI_CLI_TOKEN", raising=False)

    assert read_from_env("host") == "https://orbs.example.com"
    assert read_from_env("endpoint") is None
    assert read_from_env("token") is None


def test_require_env_vars_lists_missing_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIRST", "1")
    monkeypatch.delenv("SECOND", raising=False)
    monkeypatch.setenv("THIRD", "")

    with pytest.raises(MissingConfigurationError, match="Missing configuration for: SECOND, THIRD"):
        require_env_vars(("FIRST", "SECOND", "THIRD"))


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIRST", " 1 ")

    assert require_env_vars(("FIRST",)) == {"FIRST": "1"}
