"""Orb import pipeline.

Flow:
1) resolve user references into orb versions (source registry, read-only)
2) diff them against the destination into an ``ImportPlan`` (read-only)
3) render the plan for the user
4) apply the plan in dependency order, stopping at the first failure
"""

from __future__ import annotations

from .apply import ApplyResult, apply_import_plan
from .errors import (
    ApplyError,
    NamespaceCreationError,
    OrbCreationError,
    OrbImportError,
    PlanQueryError,
    ResolutionError,
    VersionImportError,
)
from .plan import ImportPlan, generate_import_plan
from .present import display_plan, format_plan
from .resolve import resolve_references

__all__ = [
    "ApplyError",
    "ApplyResult",
    "ImportPlan",
    "NamespaceCreationError",
    "OrbCreationError",
    "OrbImportError",
    "PlanQueryError",
    "ResolutionError",
    "VersionImportError",
    "apply_import_plan",
    "display_plan",
    "format_plan",
    "generate_import_plan",
    "resolve_references",
]
