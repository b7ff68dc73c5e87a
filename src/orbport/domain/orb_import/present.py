"""Human-readable rendering of an import plan."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

    from .plan import ImportPlan


def format_plan(plan: ImportPlan) -> str:
    lines: list[str] = []
    if plan.is_empty():
        lines.append("Nothing to do!")
    else:
        lines.append("The following actions will be performed:")
        lines.extend(f"  Create namespace '{name}'" for name in plan.new_namespaces)
        lines.extend(f"  Create orb '{orb.name}'" for orb in plan.new_orbs)
        lines.extend(f"  Import version '{version.ref}'" for version in plan.new_versions)

    if plan.already_existing_versions:
        lines.append("")
        lines.append("The following orb versions already exist:")
        lines.extend(f"  ('{version.ref}')" for version in plan.already_existing_versions)

    return "\n".join(lines) + "\n"


def display_plan(plan: ImportPlan, out: TextIO | None = None) -> None:
    """Write the plan to ``out`` (stdout by default)."""

    stream = out if out is not None else sys.stdout
    stream.write(format_plan(plan))
