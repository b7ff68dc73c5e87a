"""Apply an import plan to the destination registry.

Work runs in dependency order (namespaces, then orbs, then versions) and stops
at the first failure. Nothing applied earlier in the run is rolled back.

Identifiers are looked up again right before they are needed instead of being
taken from plan generation, since this run may have just created them.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from orbport.domain.ports import Failed, Found, RegistryError, RegistryErrorKind

from .errors import (
    NamespaceCreationError,
    OrbCreationError,
    VersionImportError,
    namespace_not_found_message,
)

if TYPE_CHECKING:
    from orbport.domain.model import Orb, OrbVersion
    from orbport.domain.ports import DestinationRegistry

    from .plan import ImportPlan

log = getLogger(__name__)

UNSUPPORTED_SYNTAX_HINT: Final[str] = (
    "\nThis can be caused by an orb using syntax that is not supported on your server version."
)


@dataclass(slots=True)
class ApplyResult:
    """Summary of the registry mutations performed by the applier."""

    namespaces_created: int = 0
    orbs_created: int = 0
    versions_imported: int = 0


def apply_import_plan(plan: ImportPlan, *, destination: DestinationRegistry) -> ApplyResult:
    """Create everything ``plan`` lists, raising ``ApplyError`` on the first failure."""

    result = ApplyResult()

    for namespace in plan.new_namespaces:
        _create_namespace(namespace, destination=destination)
        result.namespaces_created += 1

    for orb in plan.new_orbs:
        _create_orb(orb, destination=destination)
        result.orbs_created += 1

    for orb_version in plan.new_versions:
        _import_version(orb_version, destination=destination)
        result.versions_imported += 1

    return result


def _create_namespace(name: str, *, destination: DestinationRegistry) -> None:
    try:
        destination.create_namespace(name)
    except RegistryError as exc:
        raise NamespaceCreationError(
            f"unable to create '{name}' namespace: {exc}", resource=name
        ) from exc
    log.info("Created namespace %s", name)


def _create_orb(orb: Orb, *, destination: DestinationRegistry) -> None:
    namespace = orb.namespace.name
    outcome = destination.lookup_namespace_id(namespace)
    if isinstance(outcome, Failed):
        raise OrbCreationError(
            f"unable to create '{orb.name}' orb: {outcome.error}", resource=orb.name
        ) from outcome.error
    if not isinstance(outcome, Found):
        raise OrbCreationError(
            f"unable to create '{orb.name}' orb: {namespace_not_found_message(namespace)}",
            resource=orb.name,
        )

    try:
        destination.create_orb(orb.shortname, outcome.value)
    except RegistryError as exc:
        raise OrbCreationError(
            f"unable to create '{orb.name}' orb: {exc}", resource=orb.name
        ) from exc
    log.info("Created orb %s", orb.name)


def _import_version(orb_version: OrbVersion, *, destination: DestinationRegistry) -> None:
    orb = orb_version.orb
    outcome = destination.lookup_orb_id(orb.name, orb.namespace.name)
    if isinstance(outcome, Failed):
        raise VersionImportError(
            f"unable to get orb info at {orb.name}: {outcome.error}", resource=orb_version.ref
        ) from outcome.error
    if not isinstance(outcome, Found):
        reason = outcome.reason or f"the '{orb.name}' orb does not exist"
        raise VersionImportError(
            f"unable to get orb info at {orb.name}: {reason}", resource=orb_version.ref
        )

    try:
        destination.import_orb_version(outcome.value, orb_version.version, orb_version.source)
    except RegistryError as exc:
        hint = UNSUPPORTED_SYNTAX_HINT if exc.kind is RegistryErrorKind.CONFIG_SYNTAX else ""
        raise VersionImportError(
            f"unable to publish '{orb_version.ref}': {exc}{hint}", resource=orb_version.ref
        ) from exc
    log.info("Imported version %s", orb_version.ref)
