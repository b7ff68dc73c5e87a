"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

ENV_PREFIX: Final[str] = "circleci_cli"


def env_var_name(field: str, *, prefix: str = ENV_PREFIX) -> str:
    return f"{prefix}_{field}".upper()


def read_from_env(field: str, *, prefix: str = ENV_PREFIX) -> str | None:
    """Return ``PREFIX_FIELD`` (upper-cased), or ``None`` when unset or blank."""

    value = os.getenv(env_var_name(field, prefix=prefix))
    if value is None or not value.strip():
        return None
    return value.strip()


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value.strip()

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values
