from __future__ import annotations

import pytest

from orbport.domain.orb_import import ResolutionError, resolve_references
from tests.helpers.registry import FakeRegistry, make_orb_version


def test_resolve_single_orb_version() -> None:
    wanted = make_orb_version("acme/build-tools@1.2.0")
    source = FakeRegistry.containing([wanted])

    resolved = resolve_references(["acme/build-tools@1.2.0"], source=source)

    assert resolved == [wanted]
    assert source.calls == [("resolve_orb_version", "acme/build-tools@1.2.0")]


def test_resolve_reference_without_version_asks_for_volatile() -> None:
    volatile = make_orb_version("acme/build-tools@volatile")
    source = FakeRegistry.containing([volatile])

    resolved = resolve_references(["acme/build-tools"], source=source)

    assert resolved == [volatile]
    assert source.calls == [("resolve_orb_version", "acme/build-tools@volatile")]


def test_resolve_namespace_expands_to_listed_versions() -> None:
    listed = [make_orb_version("acme/a@2.0.0"), make_orb_version("acme/b@0.3.1")]
    source = FakeRegistry(namespace_listings={"acme": listed})

    resolved = resolve_references(["acme"], source=source)

    assert resolved == listed


def test_resolve_keeps_input_order_and_duplicates() -> None:
    a = make_orb_version("acme/a@1.0.0")
    b = make_orb_version("other/b@1.0.0")
    source = FakeRegistry.containing([a, b])
    source.namespace_listings["acme"] = [a]

    resolved = resolve_references(
        ["other/b@1.0.0", "acme", "acme/a@1.0.0"],
        source=source,
    )

    assert resolved == [b, a, a]


def test_resolve_unknown_orb_version_aborts() -> None:
    source = FakeRegistry()

    with pytest.raises(ResolutionError) as excinfo:
        resolve_references(["acme/missing@1.0.0", "acme/other@1.0.0"], source=source)

    assert str(excinfo.value) == (
        "orb info: no Orb 'acme/missing@1.0.0' was found; "
        "please check that the Orb reference is correct"
    )
    assert excinfo.value.reference == "acme/missing@1.0.0"
    assert source.calls == [("resolve_orb_version", "acme/missing@1.0.0")]


def test_resolve_unknown_namespace_aborts() -> None:
    source = FakeRegistry()

    with pytest.raises(ResolutionError, match="list namespace orb versions: No namespace found"):
        resolve_references(["ghost"], source=source)


def test_resolve_transport_failure_is_chained() -> None:
    source = FakeRegistry()
    source.fail("resolve_orb_version", "acme/a@1.0.0", "connection refused")

    with pytest.raises(ResolutionError, match="orb info: connection refused") as excinfo:
        resolve_references(["acme/a@1.0.0"], source=source)

    assert excinfo.value.__cause__ is source.failures[("resolve_orb_version", "acme/a@1.0.0")]


def test_resolve_namespace_listing_failure() -> None:
    source = FakeRegistry()
    source.fail("list_namespace_orb_versions", "acme", "timed out")

    with pytest.raises(ResolutionError, match="list namespace orb versions: timed out"):
        resolve_references(["acme"], source=source)
