"""Logging setup for the command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO) -> None:
    """Initialise the root logger with a terse CLI format.

    Calling it again only changes the level, e.g. once ``--debug`` is known.
    """

    logging.basicConfig(
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger().setLevel(level)
    # httpx logs every request at INFO; keep that for --debug only
    httpx_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(httpx_level)
