"""Import plan types and the plan generator.

The plan is the contract between the read-only diff against the destination
registry and the applier that mutates it. Generating a plan never writes.

Invariants:
- ``new_versions`` and ``already_existing_versions`` partition the desired
  orb versions, preserving input order
- each namespace and each orb appears at most once, in first-occurrence order
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from orbport.domain.ordered_set import OrderedSet
from orbport.domain.ports import Failed, NotFound

from .errors import PlanQueryError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orbport.domain.model import Orb, OrbVersion
    from orbport.domain.ports import DestinationRegistry

log = getLogger(__name__)


@dataclass(slots=True)
class ImportPlan:
    """Creation actions needed to replicate orb versions into a registry."""

    new_namespaces: list[str] = field(default_factory=list[str])
    new_orbs: list[Orb] = field(default_factory=list["Orb"])
    new_versions: list[OrbVersion] = field(default_factory=list["OrbVersion"])
    already_existing_versions: list[OrbVersion] = field(default_factory=list["OrbVersion"])

    def is_empty(self) -> bool:
        """True when nothing has to be created; existing versions are informational."""

        return not (self.new_namespaces or self.new_orbs or self.new_versions)


def generate_import_plan(
    orb_versions: Sequence[OrbVersion],
    *,
    destination: DestinationRegistry,
) -> ImportPlan:
    """Diff ``orb_versions`` against ``destination`` and return the plan.

    Namespace and orb checks run once per unique name; version checks run
    once per input entry. Any failure other than "not found" aborts.
    """

    namespaces: OrderedSet[str] = OrderedSet()
    orbs_by_name: dict[str, Orb] = {}
    for orb_version in orb_versions:
        orb = orb_version.orb
        namespaces.add(orb.namespace.name)
        # dict keeps the first-seen position; the value is last-seen-wins
        orbs_by_name[orb.name] = orb

    plan = ImportPlan()

    for namespace in namespaces:
        outcome = destination.namespace_exists(namespace)
        if isinstance(outcome, Failed):
            raise PlanQueryError(f"namespace check failed: {outcome.error}") from outcome.error
        if isinstance(outcome, NotFound):
            plan.new_namespaces.append(namespace)

    for orb in orbs_by_name.values():
        outcome = destination.orb_exists(orb.name, orb.namespace.name)
        if isinstance(outcome, Failed):
            raise PlanQueryError(f"orb id check failed: {outcome.error}") from outcome.error
        if isinstance(outcome, NotFound):
            plan.new_orbs.append(orb)

    for orb_version in orb_versions:
        outcome = destination.orb_version_exists(orb_version.ref)
        if isinstance(outcome, Failed):
            raise PlanQueryError(f"orb info check failed: {outcome.error}") from outcome.error
        if isinstance(outcome, NotFound):
            plan.new_versions.append(orb_version)
        else:
            plan.already_existing_versions.append(orb_version)

    log.info(
        "Import plan: namespaces=%d, orbs=%d, versions=%d, existing=%d",
        len(plan.new_namespaces),
        len(plan.new_orbs),
        len(plan.new_versions),
        len(plan.already_existing_versions),
    )
    return plan
