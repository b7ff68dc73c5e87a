"""Pydantic models describing the orb registry's GraphQL payloads.

Missing objects come back as ``null`` (or are omitted entirely), and some
servers answer with an empty ``id`` instead; both mean "does not exist".
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class RegistryBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IdPayload(RegistryBaseModel):
    id: str | None = None

    _normalize_id = field_validator("id", mode="before")(_blank_to_none)


class NamespacePayload(RegistryBaseModel):
    name: str


class VersionSummaryPayload(RegistryBaseModel):
    version: str
    created_at: datetime | None = Field(default=None, alias="createdAt")


class OrbPayload(RegistryBaseModel):
    id: str | None = None
    name: str
    created_at: datetime | None = Field(default=None, alias="createdAt")
    namespace: NamespacePayload | None = None
    versions: list[VersionSummaryPayload] = Field(default_factory=list["VersionSummaryPayload"])

    _normalize_id = field_validator("id", mode="before")(_blank_to_none)


class OrbVersionPayload(RegistryBaseModel):
    id: str | None = None
    version: str | None = None
    source: str = ""
    created_at: datetime | None = Field(default=None, alias="createdAt")
    orb: OrbPayload | None = None

    _normalize_id = field_validator("id", mode="before")(_blank_to_none)


class OrbVersionResponse(RegistryBaseModel):
    orb_version: OrbVersionPayload | None = Field(default=None, alias="orbVersion")


class NamespaceOrbVersionPayload(RegistryBaseModel):
    id: str | None = None
    version: str
    source: str = ""
    created_at: datetime | None = Field(default=None, alias="createdAt")


class NamespaceOrbNode(RegistryBaseModel):
    id: str | None = None
    name: str
    created_at: datetime | None = Field(default=None, alias="createdAt")
    versions: list[NamespaceOrbVersionPayload] = Field(
        default_factory=list["NamespaceOrbVersionPayload"]
    )


class NamespaceOrbEdge(RegistryBaseModel):
    cursor: str | None = None
    node: NamespaceOrbNode


class PageInfo(RegistryBaseModel):
    has_next_page: bool = Field(default=False, alias="hasNextPage")


class NamespaceOrbConnection(RegistryBaseModel):
    edges: list[NamespaceOrbEdge] = Field(default_factory=list["NamespaceOrbEdge"])
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class RegistryNamespacePayload(RegistryBaseModel):
    id: str | None = None
    name: str | None = None
    orbs: NamespaceOrbConnection = Field(default_factory=NamespaceOrbConnection)

    _normalize_id = field_validator("id", mode="before")(_blank_to_none)


class NamespaceOrbsResponse(RegistryBaseModel):
    registry_namespace: RegistryNamespacePayload | None = Field(
        default=None, alias="registryNamespace"
    )


class NamespaceIdResponse(RegistryBaseModel):
    registry_namespace: IdPayload | None = Field(default=None, alias="registryNamespace")


class OrbIdResponse(RegistryBaseModel):
    orb: IdPayload | None = None
    registry_namespace: IdPayload | None = Field(default=None, alias="registryNamespace")


class MutationError(RegistryBaseModel):
    message: str
    type: str | None = None


class ImportNamespacePayload(RegistryBaseModel):
    namespace: IdPayload | None = None
    errors: list[MutationError] = Field(default_factory=list["MutationError"])


class ImportNamespaceResponse(RegistryBaseModel):
    import_namespace: ImportNamespacePayload | None = Field(default=None, alias="importNamespace")


class ImportOrbPayload(RegistryBaseModel):
    orb: IdPayload | None = None
    errors: list[MutationError] = Field(default_factory=list["MutationError"])


class ImportOrbResponse(RegistryBaseModel):
    import_orb: ImportOrbPayload | None = Field(default=None, alias="importOrb")


class ImportedVersionPayload(RegistryBaseModel):
    version: str | None = None


class ImportOrbVersionPayload(RegistryBaseModel):
    orb: ImportedVersionPayload | None = None
    errors: list[MutationError] = Field(default_factory=list["MutationError"])


class ImportOrbVersionResponse(RegistryBaseModel):
    import_orb_version: ImportOrbVersionPayload | None = Field(
        default=None, alias="importOrbVersion"
    )
