from __future__ import annotations

import io

import pytest

from orbport import app as app_module
from orbport.app import CONFIRM_MESSAGE, import_orbs
from orbport.config.registry import RegistryConfig  # noqa: TC001
from orbport.domain.orb_import import ApplyResult, ResolutionError
from tests.helpers.registry import FakeRegistry, make_orb_version


def _never_asked(message: str) -> bool:
    raise AssertionError(f"unexpected prompt: {message}")


def test_import_orbs_full_run_after_confirmation(destination: FakeRegistry) -> None:
    wanted = make_orb_version("acme/build-tools@1.2.0")
    source = FakeRegistry.containing([wanted])
    prompts: list[str] = []
    out = io.StringIO()

    def confirm(message: str) -> bool:
        prompts.append(message)
        return True

    result = import_orbs(
        ["acme/build-tools@1.2.0"],
        source=source,
        destination=destination,
        confirm=confirm,
        out=out,
    )

    assert result == ApplyResult(namespaces_created=1, orbs_created=1, versions_imported=1)
    assert prompts == [CONFIRM_MESSAGE]
    assert out.getvalue().startswith("The following actions will be performed:\n")
    assert "acme/build-tools@1.2.0" in destination.versions
    assert source.mutations() == []
    assert destination.closed == 0


def test_import_orbs_declined_makes_no_changes(destination: FakeRegistry) -> None:
    source = FakeRegistry.containing([make_orb_version("acme/a@1.0.0")])

    result = import_orbs(
        ["acme/a@1.0.0"],
        source=source,
        destination=destination,
        confirm=lambda _: False,
        out=io.StringIO(),
    )

    assert result is None
    assert destination.mutations() == []


def test_import_orbs_no_prompt_skips_confirmation(destination: FakeRegistry) -> None:
    source = FakeRegistry(namespace_listings={"acme": [make_orb_version("acme/a@1.0.0")]})

    result = import_orbs(
        ["acme"],
        source=source,
        destination=destination,
        no_prompt=True,
        confirm=_never_asked,
        out=io.StringIO(),
    )

    assert result is not None
    assert result.versions_imported == 1


def test_import_orbs_nothing_to_do_does_not_prompt() -> None:
    existing = make_orb_version("acme/build-tools@1.2.0")
    source = FakeRegistry.containing([existing])
    destination = FakeRegistry.containing([existing])
    out = io.StringIO()

    result = import_orbs(
        ["acme/build-tools@1.2.0"],
        source=source,
        destination=destination,
        confirm=_never_asked,
        out=out,
    )

    assert result == ApplyResult()
    assert out.getvalue() == (
        "Nothing to do!\n"
        "\n"
        "The following orb versions already exist:\n"
        "  ('acme/build-tools@1.2.0')\n"
    )
    assert destination.mutations() == []


def test_import_orbs_resolution_failure_touches_nothing(destination: FakeRegistry) -> None:
    with pytest.raises(ResolutionError):
        import_orbs(
            ["acme/missing@1.0.0"],
            source=FakeRegistry(),
            destination=destination,
            confirm=_never_asked,
            out=io.StringIO(),
        )

    assert destination.calls == []


def test_import_orbs_integration_testing_resolves_against_destination() -> None:
    wanted = make_orb_version("acme/a@1.0.0")
    destination = FakeRegistry()
    destination.versions[wanted.ref] = wanted

    result = import_orbs(
        ["acme/a@1.0.0"],
        destination=destination,
        integration_testing=True,
        no_prompt=True,
        out=io.StringIO(),
    )

    assert destination.calls[0] == ("resolve_orb_version", "acme/a@1.0.0")
    assert result is not None
    assert result.namespaces_created == 1


def test_import_orbs_requires_references(destination: FakeRegistry) -> None:
    with pytest.raises(ValueError, match="At least one"):
        import_orbs([], source=FakeRegistry(), destination=destination)


@pytest.mark.usefixtures("clear_registry_env")
def test_import_orbs_builds_registry_clients(monkeypatch: pytest.MonkeyPatch) -> None:
    built: list[RegistryConfig] = []
    registry = FakeRegistry.containing([make_orb_version("acme/a@1.0.0")])

    def fake_client(*, config: RegistryConfig) -> FakeRegistry:
        built.append(config)
        return registry

    monkeypatch.setattr(app_module, "RegistryClient", fake_client)

    import_orbs(
        ["acme/a@1.0.0"],
        host="https://orbs.example.com",
        token="secret",
        confirm=_never_asked,
        out=io.StringIO(),
    )

    destination_config, source_config = built
    assert destination_config.host == "https://orbs.example.com"
    assert destination_config.token == "secret"
    assert source_config.host == "https://circleci.com"
    assert source_config.token is None
    assert registry.closed == 2
