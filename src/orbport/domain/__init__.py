"""Domain types and ports for copying orbs between registries."""

from __future__ import annotations

from .model import (
    Namespace,
    NamespaceReference,
    Orb,
    OrbVersion,
    OrbVersionReference,
    OrbVersionSummary,
    parse_reference,
)
from .ports import (
    DestinationRegistry,
    Failed,
    Found,
    NotFound,
    QueryOutcome,
    RegistryError,
    RegistryErrorKind,
    SourceRegistry,
)

__all__ = [
    "DestinationRegistry",
    "Failed",
    "Found",
    "Namespace",
    "NamespaceReference",
    "NotFound",
    "Orb",
    "OrbVersion",
    "OrbVersionReference",
    "OrbVersionSummary",
    "QueryOutcome",
    "RegistryError",
    "RegistryErrorKind",
    "SourceRegistry",
    "parse_reference",
]
