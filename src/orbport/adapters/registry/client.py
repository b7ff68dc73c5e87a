"""Orb registry client implementing the source and destination ports."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self

from orbport.adapters.graphql import GraphQLClient, error_kind_for
from orbport.domain.model import NamespaceReference, parse_reference
from orbport.domain.orb_import.errors import namespace_not_found_message
from orbport.domain.ports import (
    Failed,
    Found,
    NotFound,
    QueryOutcome,
    RegistryError,
    RegistryErrorKind,
)

from .queries import (
    IMPORT_NAMESPACE_MUTATION,
    IMPORT_ORB_MUTATION,
    IMPORT_ORB_VERSION_MUTATION,
    NAMESPACE_ID_QUERY,
    NAMESPACE_ORBS_QUERY,
    ORB_EXISTS_QUERY,
    ORB_ID_QUERY,
    ORB_VERSION_QUERY,
)
from .schema import (
    ImportNamespaceResponse,
    ImportOrbResponse,
    ImportOrbVersionResponse,
    MutationError,
    NamespaceIdResponse,
    NamespaceOrbsResponse,
    OrbIdResponse,
    OrbVersionResponse,
)
from .translator import parse_namespace_orb_versions, parse_orb_version

if TYPE_CHECKING:
    from types import TracebackType

    from orbport.adapters.http_resilience import ResilientClientFactory
    from orbport.config.registry import RegistryConfig
    from orbport.domain.model import OrbVersion, OrbVersionReference

log = getLogger(__name__)


def _mutation_error(errors: list[MutationError]) -> RegistryError:
    message = "\n".join(error.message for error in errors)
    return RegistryError(message, kind=error_kind_for(message))


class RegistryClient:
    """GraphQL-backed access to one orb registry.

    Queries never raise: transport and server failures come back as
    ``Failed``. Mutations raise ``RegistryError``. Call ``close`` when done.
    """

    def __init__(
        self,
        *,
        config: RegistryConfig,
        client_factory: ResilientClientFactory | None = None,
    ) -> None:
        self._graphql = GraphQLClient(config=config, client_factory=client_factory)

    @property
    def config(self) -> RegistryConfig:
        return self._graphql.config

    def close(self) -> None:
        self._graphql.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # source registry

    def resolve_orb_version(self, reference: str) -> QueryOutcome[OrbVersion]:
        parsed = parse_reference(reference)
        if isinstance(parsed, NamespaceReference):
            raise ValueError(f"Not an orb reference: {reference}")
        return self._query_orb_version(parsed)

    def list_namespace_orb_versions(self, namespace: str) -> QueryOutcome[list[OrbVersion]]:
        orb_versions: list[OrbVersion] = []
        after = ""
        while True:
            try:
                response = self._graphql.run(
                    NAMESPACE_ORBS_QUERY,
                    {"namespace": namespace, "after": after},
                    response_model=NamespaceOrbsResponse,
                )
            except RegistryError as exc:
                return Failed(error=exc)

            registry_namespace = response.registry_namespace
            if registry_namespace is None:
                return NotFound(reason=f"No namespace found: {namespace}")

            orb_versions.extend(parse_namespace_orb_versions(response))
            connection = registry_namespace.orbs
            if not connection.page_info.has_next_page or not connection.edges:
                break
            cursor = connection.edges[-1].cursor
            if not cursor:
                break
            after = cursor

        log.debug("Namespace %s lists %d orb version(s)", namespace, len(orb_versions))
        return Found(value=orb_versions)

    # destination registry

    def namespace_exists(self, name: str) -> QueryOutcome[str]:
        return self.lookup_namespace_id(name)

    def orb_exists(self, orb_name: str, namespace: str) -> QueryOutcome[str]:
        try:
            response = self._graphql.run(
                ORB_EXISTS_QUERY,
                {"name": orb_name, "namespace": namespace},
                response_model=OrbIdResponse,
            )
        except RegistryError as exc:
            return Failed(error=exc)
        if response.orb is None or response.orb.id is None:
            return NotFound(reason=f"the '{orb_name}' orb does not exist")
        return Found(value=response.orb.id)

    def orb_version_exists(self, reference: str) -> QueryOutcome[OrbVersion]:
        return self.resolve_orb_version(reference)

    def lookup_namespace_id(self, name: str) -> QueryOutcome[str]:
        try:
            response = self._graphql.run(
                NAMESPACE_ID_QUERY,
                {"name": name},
                response_model=NamespaceIdResponse,
            )
        except RegistryError as exc:
            return Failed(error=exc)
        namespace = response.registry_namespace
        if namespace is None or namespace.id is None:
            return NotFound(reason=namespace_not_found_message(name))
        return Found(value=namespace.id)

    def lookup_orb_id(self, orb_name: str, namespace: str) -> QueryOutcome[str]:
        try:
            response = self._graphql.run(
                ORB_ID_QUERY,
                {"name": orb_name, "namespace": namespace},
                response_model=OrbIdResponse,
            )
        except RegistryError as exc:
            return Failed(error=exc)
        if response.orb is not None and response.orb.id is not None:
            return Found(value=response.orb.id)
        if response.registry_namespace is None or response.registry_namespace.id is None:
            return NotFound(reason=namespace_not_found_message(namespace))
        shortname = orb_name.partition("/")[2] or orb_name
        return NotFound(
            reason=(
                f"the '{shortname}' orb does not exist in the '{namespace}' namespace. "
                "Did you misspell the namespace or the orb name?"
            )
        )

    def create_namespace(self, name: str) -> str:
        response = self._graphql.run(
            IMPORT_NAMESPACE_MUTATION,
            {"name": name},
            response_model=ImportNamespaceResponse,
            mutation=True,
        )
        payload = response.import_namespace
        if payload is not None and payload.errors:
            raise _mutation_error(payload.errors)
        if payload is None or payload.namespace is None or payload.namespace.id is None:
            raise RegistryError(
                f"importNamespace returned no id for namespace {name}",
                kind=RegistryErrorKind.GRAPHQL,
            )
        return payload.namespace.id

    def create_orb(self, orb_name: str, namespace_id: str) -> str:
        response = self._graphql.run(
            IMPORT_ORB_MUTATION,
            {"name": orb_name, "registryNamespaceId": namespace_id},
            response_model=ImportOrbResponse,
            mutation=True,
        )
        payload = response.import_orb
        if payload is not None and payload.errors:
            raise _mutation_error(payload.errors)
        if payload is None or payload.orb is None or payload.orb.id is None:
            raise RegistryError(
                f"importOrb returned no id for orb {orb_name}",
                kind=RegistryErrorKind.GRAPHQL,
            )
        return payload.orb.id

    def import_orb_version(self, orb_id: str, version: str, source: str) -> str:
        response = self._graphql.run(
            IMPORT_ORB_VERSION_MUTATION,
            {"config": source, "orbId": orb_id, "version": version},
            response_model=ImportOrbVersionResponse,
            mutation=True,
        )
        payload = response.import_orb_version
        if payload is not None and payload.errors:
            raise _mutation_error(payload.errors)
        if payload is None or payload.orb is None or payload.orb.version is None:
            return version
        return payload.orb.version

    def _query_orb_version(self, reference: OrbVersionReference) -> QueryOutcome[OrbVersion]:
        try:
            response = self._graphql.run(
                ORB_VERSION_QUERY,
                {"orbVersionRef": reference.ref},
                response_model=OrbVersionResponse,
            )
        except RegistryError as exc:
            return Failed(error=exc)
        payload = response.orb_version
        if payload is None or payload.id is None:
            return NotFound(reason=f"no Orb '{reference.ref}' was found")
        return Found(value=parse_orb_version(payload, reference=reference))

