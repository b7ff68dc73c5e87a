"""Expand user references into the orb versions to import.

A bare namespace expands to the latest version of every orb it holds; a
fully-qualified reference resolves to exactly one orb version. Lookups are
read-only and run against the source registry. No deduplication happens here.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from orbport.domain.model import NamespaceReference, parse_reference
from orbport.domain.ports import Failed, Found

from .errors import ResolutionError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from orbport.domain.model import OrbVersion, OrbVersionReference
    from orbport.domain.ports import SourceRegistry

log = getLogger(__name__)


def resolve_references(
    references: Iterable[str],
    *,
    source: SourceRegistry,
) -> list[OrbVersion]:
    """Return the orb versions named by ``references``, in input order.

    The first reference that cannot be resolved aborts the whole run.
    """

    orb_versions: list[OrbVersion] = []
    for raw in references:
        parsed = parse_reference(raw)
        if isinstance(parsed, NamespaceReference):
            resolved = _resolve_namespace(parsed, source=source)
        else:
            resolved = [_resolve_orb_version(parsed, source=source)]
        log.debug("Reference %s resolved to %d orb version(s)", raw, len(resolved))
        orb_versions.extend(resolved)
    return orb_versions


def _resolve_namespace(
    reference: NamespaceReference,
    *,
    source: SourceRegistry,
) -> list[OrbVersion]:
    # Only the most recent version of each orb is listed.
    outcome = source.list_namespace_orb_versions(reference.name)
    if isinstance(outcome, Found):
        return list(outcome.value)
    if isinstance(outcome, Failed):
        raise ResolutionError(
            f"list namespace orb versions: {outcome.error}",
            reference=reference.name,
        ) from outcome.error
    raise ResolutionError(
        "list namespace orb versions: No namespace found",
        reference=reference.name,
    )


def _resolve_orb_version(
    reference: OrbVersionReference,
    *,
    source: SourceRegistry,
) -> OrbVersion:
    outcome = source.resolve_orb_version(reference.ref)
    if isinstance(outcome, Found):
        return outcome.value
    if isinstance(outcome, Failed):
        raise ResolutionError(
            f"orb info: {outcome.error}",
            reference=reference.ref,
        ) from outcome.error
    raise ResolutionError(
        f"orb info: no Orb '{reference.ref}' was found; "
        "please check that the Orb reference is correct",
        reference=reference.ref,
    )
