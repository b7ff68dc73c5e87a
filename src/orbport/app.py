"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import ExitStack
from logging import getLogger
from typing import TYPE_CHECKING

from orbport.adapters.registry import RegistryClient
from orbport.config import get_destination_registry_config, get_source_registry_config
from orbport.domain.orb_import import (
    ApplyResult,
    apply_import_plan,
    display_plan,
    generate_import_plan,
    resolve_references,
)
from orbport.domain.ports import SourceRegistry
from orbport.ui.prompt import ask_user_to_confirm

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from orbport.domain.ports import DestinationRegistry

type Confirm = Callable[[str], bool]

CONFIRM_MESSAGE = "Are you sure you would like to proceed?"

log = getLogger(__name__)


def import_orbs(
    references: Sequence[str],
    *,
    source: SourceRegistry | None = None,
    destination: DestinationRegistry | None = None,
    host: str | None = None,
    token: str | None = None,
    debug: bool = False,
    integration_testing: bool = False,
    no_prompt: bool = False,
    confirm: Confirm = ask_user_to_confirm,
    out: TextIO | None = None,
) -> ApplyResult | None:
    """Copy the orb versions named by ``references`` into the destination registry.

    Returns ``None`` when the user declines the plan. With
    ``integration_testing`` the references are resolved against the
    destination instead of the public cloud registry.
    """

    if not references:
        raise ValueError("At least one namespace or orb reference is required")

    with ExitStack() as owned:
        effective_destination = destination or owned.enter_context(
            RegistryClient(
                config=get_destination_registry_config(host=host, token=token, debug=debug)
            )
        )
        effective_source = source or _build_source(
            effective_destination,
            owned=owned,
            debug=debug,
            integration_testing=integration_testing,
        )
        return _run_import(
            references,
            source=effective_source,
            destination=effective_destination,
            no_prompt=no_prompt,
            confirm=confirm,
            out=out,
        )


def _run_import(
    references: Sequence[str],
    *,
    source: SourceRegistry,
    destination: DestinationRegistry,
    no_prompt: bool,
    confirm: Confirm,
    out: TextIO | None,
) -> ApplyResult | None:
    log.info("Starting orb import: references=%s", ", ".join(references))

    orb_versions = resolve_references(references, source=source)
    plan = generate_import_plan(orb_versions, destination=destination)
    display_plan(plan, out)

    if plan.is_empty():
        return ApplyResult()
    if not no_prompt and not confirm(CONFIRM_MESSAGE):
        log.info("Import cancelled by user")
        return None

    result = apply_import_plan(plan, destination=destination)
    log.info(
        "Finished orb import: namespaces=%s, orbs=%s, versions=%s",
        result.namespaces_created,
        result.orbs_created,
        result.versions_imported,
    )
    return result


def _build_source(
    destination: DestinationRegistry,
    *,
    owned: ExitStack,
    debug: bool,
    integration_testing: bool,
) -> SourceRegistry:
    if not integration_testing:
        return owned.enter_context(RegistryClient(config=get_source_registry_config(debug=debug)))
    if not isinstance(destination, SourceRegistry):
        raise TypeError("Integration testing needs a destination that can also resolve orbs")
    return destination
