"""Orb registry adapter."""

from __future__ import annotations

from .client import RegistryClient
from .translator import parse_namespace_orb_versions, parse_orb, parse_orb_version

__all__ = [
    "RegistryClient",
    "parse_namespace_orb_versions",
    "parse_orb",
    "parse_orb_version",
]
