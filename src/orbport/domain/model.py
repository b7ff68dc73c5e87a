"""Registry entities: namespaces, orbs and orb versions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import datetime

VOLATILE_VERSION: Final[str] = "volatile"


@dataclass(slots=True, frozen=True)
class Namespace:
    """Ownership scope for orbs, unique per registry."""

    name: str


@dataclass(slots=True, frozen=True)
class OrbVersionSummary:
    """One entry of an orb's known version list."""

    version: str
    created_at: datetime | None = None


@dataclass(slots=True, frozen=True)
class Orb:
    """A reusable configuration module published into a namespace.

    ``name`` is fully qualified (``namespace/orb``). ``versions`` is ordered
    as the registry returns it, most recent first, so ``highest_version`` is
    the first entry when the registry reported any.
    """

    name: str
    namespace: Namespace
    versions: tuple[OrbVersionSummary, ...] = ()
    highest_version: str | None = None
    created_at: datetime | None = None
    id: str | None = None

    @property
    def shortname(self) -> str:
        _, _, short = self.name.partition("/")
        return short or self.name


@dataclass(slots=True, frozen=True)
class OrbVersion:
    """An immutable release of an orb, identified by ``(orb.name, version)``."""

    orb: Orb
    version: str
    source: str = ""
    created_at: datetime | None = None
    id: str | None = None

    @property
    def ref(self) -> str:
        return f"{self.orb.name}@{self.version}"

    @property
    def key(self) -> tuple[str, str]:
        return (self.orb.name, self.version)


@dataclass(slots=True, frozen=True)
class NamespaceReference:
    name: str


@dataclass(slots=True, frozen=True)
class OrbVersionReference:
    orb_name: str
    version: str

    @property
    def namespace(self) -> str:
        return self.orb_name.partition("/")[0]

    @property
    def ref(self) -> str:
        return f"{self.orb_name}@{self.version}"


type Reference = NamespaceReference | OrbVersionReference


def is_namespace(reference: str) -> bool:
    return "/" not in reference


def parse_reference(reference: str) -> Reference:
    """Classify a user reference as a bare namespace or a versioned orb.

    A fully-qualified reference without ``@version`` points at the registry's
    ``volatile`` alias, i.e. whatever version was published last.
    """

    value = reference.strip()
    if not value:
        raise ValueError("Empty orb reference")
    if is_namespace(value):
        return NamespaceReference(name=value)
    orb_name, sep, version = value.partition("@")
    if not sep:
        version = VOLATILE_VERSION
    return OrbVersionReference(orb_name=orb_name, version=version)
