"""Errors raised by the orb import pipeline."""

from __future__ import annotations


class OrbImportError(RuntimeError):
    """Base class for fatal orb import failures."""


class ResolutionError(OrbImportError):
    """Raised when a user reference cannot be expanded into orb versions."""

    def __init__(self, message: str, *, reference: str) -> None:
        super().__init__(message)
        self.reference = reference


class PlanQueryError(OrbImportError):
    """Raised when an existence check against the destination fails."""


class ApplyError(OrbImportError):
    """Raised when applying a plan stops at a resource."""

    def __init__(self, message: str, *, resource: str) -> None:
        super().__init__(message)
        self.resource = resource


class NamespaceCreationError(ApplyError):
    """Raised when a namespace cannot be created in the destination."""


class OrbCreationError(ApplyError):
    """Raised when an orb cannot be created under its namespace."""


class VersionImportError(ApplyError):
    """Raised when an orb version's source cannot be imported."""


def namespace_not_found_message(name: str) -> str:
    return (
        f"the namespace '{name}' does not exist. Did you misspell the namespace, "
        "or maybe you meant to create the namespace first?"
    )
