"""Translate registry payloads into domain entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orbport.domain.model import Namespace, Orb, OrbVersion, OrbVersionSummary

if TYPE_CHECKING:
    from orbport.domain.model import OrbVersionReference

    from .schema import NamespaceOrbsResponse, OrbPayload, OrbVersionPayload


def _namespace_for(orb_name: str) -> Namespace:
    return Namespace(name=orb_name.partition("/")[0])


def parse_orb(payload: OrbPayload) -> Orb:
    versions = tuple(
        OrbVersionSummary(version=item.version, created_at=item.created_at)
        for item in payload.versions
    )
    namespace = (
        Namespace(name=payload.namespace.name)
        if payload.namespace is not None
        else _namespace_for(payload.name)
    )
    return Orb(
        name=payload.name,
        namespace=namespace,
        versions=versions,
        highest_version=versions[0].version if versions else None,
        created_at=payload.created_at,
        id=payload.id,
    )


def parse_orb_version(payload: OrbVersionPayload, *, reference: OrbVersionReference) -> OrbVersion:
    """Build an ``OrbVersion``; fields the query did not select fall back to ``reference``."""

    orb = (
        parse_orb(payload.orb)
        if payload.orb is not None
        else Orb(name=reference.orb_name, namespace=_namespace_for(reference.orb_name))
    )
    return OrbVersion(
        orb=orb,
        version=payload.version or reference.version,
        source=payload.source,
        created_at=payload.created_at,
        id=payload.id,
    )


def parse_namespace_orb_versions(response: NamespaceOrbsResponse) -> list[OrbVersion]:
    """Flatten one page of a namespace listing, keeping registry order."""

    if response.registry_namespace is None:
        return []
    namespace_name = response.registry_namespace.name
    orb_versions: list[OrbVersion] = []
    for edge in response.registry_namespace.orbs.edges:
        node = edge.node
        namespace = Namespace(name=namespace_name) if namespace_name else _namespace_for(node.name)
        orb = Orb(name=node.name, namespace=namespace)
        orb_versions.extend(
            OrbVersion(
                orb=orb,
                version=item.version,
                source=item.source,
                created_at=item.created_at,
                id=item.id,
            )
            for item in node.versions
        )
    return orb_versions
