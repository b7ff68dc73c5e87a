from __future__ import annotations

import pytest

from tests.helpers.registry import FakeRegistry


@pytest.fixture
def destination() -> FakeRegistry:
    """An empty destination registry."""
    return FakeRegistry()


@pytest.fixture
def clear_registry_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CIRCLECI_CLI_HOST", "CIRCLECI_CLI_ENDPOINT", "CIRCLECI_CLI_TOKEN"):
        monkeypatch.delenv(name, raising=False)
