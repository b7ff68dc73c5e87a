"""Registry ports used by the orb import pipeline.

Queries report their result as a tagged outcome:
- ``Found`` carries the value
- ``NotFound`` is the normal "does not exist (yet)" signal
- ``Failed`` carries the ``RegistryError`` that prevented an answer

Mutations return the created identifier or raise ``RegistryError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import OrbVersion


class RegistryErrorKind(StrEnum):
    """Classification attached to registry failures by the transport."""

    TRANSPORT = "transport"
    GRAPHQL = "graphql"
    CONFIG_SYNTAX = "config_syntax"


class RegistryError(RuntimeError):
    """Raised when a registry call cannot be completed."""

    def __init__(
        self,
        message: str,
        *,
        kind: RegistryErrorKind = RegistryErrorKind.TRANSPORT,
    ) -> None:
        super().__init__(message)
        self.kind = kind


class QueryStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class Found[T]:
    value: T
    status: Literal[QueryStatus.FOUND] = QueryStatus.FOUND


@dataclass(slots=True, frozen=True)
class NotFound:
    reason: str | None = None
    status: Literal[QueryStatus.NOT_FOUND] = QueryStatus.NOT_FOUND


@dataclass(slots=True, frozen=True)
class Failed:
    error: RegistryError
    status: Literal[QueryStatus.FAILED] = QueryStatus.FAILED


type QueryOutcome[T] = Found[T] | NotFound | Failed


@runtime_checkable
class SourceRegistry(Protocol):
    """Read-only view of the registry orbs are copied from."""

    def resolve_orb_version(self, reference: str) -> QueryOutcome[OrbVersion]: ...

    def list_namespace_orb_versions(self, namespace: str) -> QueryOutcome[list[OrbVersion]]: ...


@runtime_checkable
class DestinationRegistry(Protocol):
    """Registry orbs are copied into."""

    def namespace_exists(self, name: str) -> QueryOutcome[str]: ...

    def orb_exists(self, orb_name: str, namespace: str) -> QueryOutcome[str]: ...

    def orb_version_exists(self, reference: str) -> QueryOutcome[OrbVersion]: ...

    def lookup_namespace_id(self, name: str) -> QueryOutcome[str]: ...

    def lookup_orb_id(self, orb_name: str, namespace: str) -> QueryOutcome[str]: ...

    def create_namespace(self, name: str) -> str: ...

    def create_orb(self, orb_name: str, namespace_id: str) -> str: ...

    def import_orb_version(self, orb_id: str, version: str, source: str) -> str: ...
