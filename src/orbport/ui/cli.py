from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING, NoReturn

from dotenv import load_dotenv

from orbport.app import import_orbs
from orbport.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise instead of exiting so argument errors share the CLI's exit path."""

    def error(self, message: str) -> NoReturn:
        raise ValueError(message)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="orbport",
        description="Import orbs from circleci.com into a private orb registry",
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Destination registry host (defaults to CIRCLECI_CLI_HOST, then circleci.com)",
    )
    parser.add_argument(
        "--token",
        type=str,
        help="API token for the destination registry (defaults to CIRCLECI_CLI_TOKEN)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log GraphQL requests and responses",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, parser_class=_ArgumentParser)

    import_parser = subparsers.add_parser(
        "import",
        help="Import namespaces, orbs and orb versions",
    )
    import_parser.add_argument(
        "references",
        nargs="+",
        metavar="REF",
        help="<namespace> (latest version of each orb) or <namespace>/<orb>[@<version>]",
    )
    import_parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Apply the plan without asking for confirmation",
    )
    import_parser.add_argument(
        "--integration-testing",
        action="store_true",
        help=argparse.SUPPRESS,
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.debug:
        configure_logging(level=logging.DEBUG)

    try:
        if parsed_args.command == "import":
            result = import_orbs(
                parsed_args.references,
                host=parsed_args.host,
                token=parsed_args.token,
                debug=parsed_args.debug,
                integration_testing=parsed_args.integration_testing,
                no_prompt=parsed_args.no_prompt,
            )
            if result is None:
                log.info("No changes were made")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during orb import")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
