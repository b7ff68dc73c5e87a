from __future__ import annotations

import pytest

from orbport.domain.model import (
    VOLATILE_VERSION,
    Namespace,
    NamespaceReference,
    Orb,
    OrbVersion,
    OrbVersionReference,
    is_namespace,
    parse_reference,
)


def test_parse_reference_bare_namespace() -> None:
    assert parse_reference("acme") == NamespaceReference(name="acme")
    assert is_namespace("acme")


def test_parse_reference_versioned_orb() -> None:
    parsed = parse_reference("acme/build-tools@1.2.0")

    assert parsed == OrbVersionReference(orb_name="acme/build-tools", version="1.2.0")
    assert isinstance(parsed, OrbVersionReference)
    assert parsed.namespace == "acme"
    assert parsed.ref == "acme/build-tools@1.2.0"


def test_parse_reference_without_version_uses_volatile() -> None:
    parsed = parse_reference(" acme/build-tools ")

    assert parsed == OrbVersionReference(orb_name="acme/build-tools", version=VOLATILE_VERSION)


def test_parse_reference_rejects_blank_input() -> None:
    with pytest.raises(ValueError, match="Empty orb reference"):
        parse_reference("   ")


def test_orb_version_ref_and_key() -> None:
    orb = Orb(name="acme/build-tools", namespace=Namespace(name="acme"))
    orb_version = OrbVersion(orb=orb, version="1.2.0")

    assert orb.shortname == "build-tools"
    assert orb_version.ref == "acme/build-tools@1.2.0"
    assert orb_version.key == ("acme/build-tools", "1.2.0")


def test_orb_versions_compare_by_value() -> None:
    first = OrbVersion(orb=Orb(name="acme/a", namespace=Namespace(name="acme")), version="1.0.0")
    second = OrbVersion(orb=Orb(name="acme/a", namespace=Namespace(name="acme")), version="1.0.0")

    assert first == second
    assert len({first, second}) == 1
