"""HTTP client for a registry's GraphQL endpoint."""

from __future__ import annotations

import asyncio
import dataclasses
from logging import getLogger
from typing import TYPE_CHECKING, Final, Self

import httpx
from pydantic import BaseModel, ValidationError

from orbport import __version__
from orbport.adapters.http_resilience import ResilientClient, build_limiter
from orbport.domain.ports import RegistryError, RegistryErrorKind

from .schema import GraphQLResponse, join_error_messages

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from orbport.adapters.http_resilience import ResilientClientFactory
    from orbport.config.registry import RegistryConfig

log = getLogger(__name__)

CONFIG_ERROR_PREFIX: Final[str] = "ERROR IN CONFIG FILE"
USER_AGENT: Final[str] = f"orbport/{__version__}"


def error_kind_for(
    message: str,
    *,
    default: RegistryErrorKind = RegistryErrorKind.GRAPHQL,
) -> RegistryErrorKind:
    """Classify a server error message; config compilation errors get their own kind."""

    if message.startswith(CONFIG_ERROR_PREFIX):
        return RegistryErrorKind.CONFIG_SYNTAX
    return default


async def _log_response(response: httpx.Response) -> None:
    await response.aread()
    log.debug("<< request id: %s", response.headers.get("X-Request-Id"))
    log.debug("<< result status: %s %s", response.status_code, response.reason_phrase)
    log.debug("<< %s", response.text)


class GraphQLClient:
    """Send GraphQL requests and decode ``data`` into pydantic models.

    Every call is a blocking round-trip on a fresh HTTP client. Calls share one
    event loop and one client-side rate limiter, so the rate limit holds across
    calls. Mutations use a narrower retry policy so a write the server may
    already have committed is not sent twice. Call ``close`` when done.
    """

    def __init__(
        self,
        *,
        config: RegistryConfig,
        client_factory: ResilientClientFactory | None = None,
    ) -> None:
        self._config = config
        resilience = config.resilience
        if config.debug:
            resilience = dataclasses.replace(
                resilience,
                response_hooks=(*resilience.response_hooks, _log_response),
            )
        self._resilience = resilience
        self._mutation_resilience = dataclasses.replace(
            resilience, retry=resilience.retry.for_mutations()
        )
        self._limiter = build_limiter(resilience)
        self._client_factory: ResilientClientFactory = client_factory or ResilientClient
        self._runner = asyncio.Runner()

    @property
    def config(self) -> RegistryConfig:
        return self._config

    def run[M: BaseModel](
        self,
        query: str,
        variables: Mapping[str, object],
        *,
        response_model: type[M],
        mutation: bool = False,
    ) -> M:
        return self._runner.run(
            self._run_async(query, variables, response_model=response_model, mutation=mutation)
        )

    def close(self) -> None:
        self._runner.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    async def _run_async[M: BaseModel](
        self,
        query: str,
        variables: Mapping[str, object],
        *,
        response_model: type[M],
        mutation: bool,
    ) -> M:
        if self._config.debug:
            log.debug(">> variables: %s", dict(variables))
            log.debug(">> query: %s", query)

        resilience = self._mutation_resilience if mutation else self._resilience
        try:
            async with self._client_factory(resilience, limiter=self._limiter) as client:
                response = await client.post(
                    self._config.address,
                    json={"query": query, "variables": dict(variables)},
                    headers=self._headers(),
                )
        except httpx.HTTPError as exc:
            raise RegistryError(str(exc) or type(exc).__name__) from exc

        if response.status_code != httpx.codes.OK:
            raise RegistryError(
                f"failure calling GraphQL API: {response.status_code} {response.reason_phrase}"
            )

        try:
            envelope = GraphQLResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise RegistryError(f"decoding response: {exc}") from exc

        if envelope.errors:
            message = join_error_messages(envelope.errors)
            raise RegistryError(message, kind=error_kind_for(message))

        try:
            return response_model.model_validate(envelope.data or {})
        except ValidationError as exc:
            raise RegistryError(f"decoding response: {exc}") from exc

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json; charset=utf-8",
            "Accept": "application/json; charset=utf-8",
            "User-Agent": USER_AGENT,
        }
        if self._config.token:
            headers["Authorization"] = self._config.token
        return headers
