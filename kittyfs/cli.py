"""Command-line front door for kittyfs.

Parses CLI options, configures logging and the config location, then
dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .listing import enumerate_roots
from .runtime import run_browser
from .runtime import config

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
PACKAGE_LOGGER = "kittyfs"


def configure_logging(log_file: str | None, level: str = "WARNING") -> None:
    """Send log records to ``log_file``; stay silent otherwise.

    The terminal belongs to the UI while it runs, so nothing is ever logged
    to stderr.
    """
    if log_file is None:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if not any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers):
            package_logger.addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kittyfs",
        description="Browse drives and directories in a terminal panel.",
    )
    parser.add_argument("--config", metavar="PATH", default=None, help="Theme config file to read and write.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--roots", action="store_true", help="Print the enumerated drives/roots and exit.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write diagnostic logs to PATH.")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Minimum level written to --log-file (default: WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    Bootstrap failures (no controlling terminal, terminal setup errors) are
    fatal and exit with status 1.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    if args.config is not None:
        config.set_config_path(Path(args.config))

    if args.roots:
        for root in enumerate_roots():
            sys.stdout.write(root.path + "\n")
        return

    try:
        run_browser(no_color=args.no_color)
    except Exception as exc:
        logging.getLogger(__name__).exception("browser runtime failed")
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
