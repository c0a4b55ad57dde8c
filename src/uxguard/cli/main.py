from __future__ import annotations

import argparse
import logging
import os

from uxguard.cli.decode import configure_parser as configure_decode
from uxguard.cli.show import configure_parser as configure_show
from uxguard.cli.truncate import configure_parser as configure_truncate


def build_parser() -> argparse.ArgumentParser:
    from uxguard import __version__

    parser = argparse.ArgumentParser(
        prog="uxguard",
        description="Driver distraction restrictions: blocked functions and text limits",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print full traceback on errors (or set UXGUARD_TRACE=1)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    configure_decode(subparsers)
    configure_truncate(subparsers)
    configure_show(subparsers)

    return parser


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    from uxguard.cli.ui import error_console

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, rich_tracebacks=False, markup=False)],
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    _configure_logging(bool(getattr(args, "verbose", False)))

    want_trace = bool(getattr(args, "trace", False)) or os.environ.get("UXGUARD_TRACE") in {
        "1",
        "true",
        "TRUE",
        "yes",
        "YES",
    }
    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        # Keep Ctrl-C quiet by default.
        return 130
    except Exception as exc:
        if want_trace:
            from rich.console import Console

            Console().print_exception()
        else:
            from uxguard.cli.ui import print_error

            tip = "re-run with --trace to see the full traceback."
            if isinstance(exc, FileNotFoundError):
                tip = "Check that the config or script path is correct."
            elif "Unknown restriction flag" in str(exc):
                tip = "Use integer masks or flag names such as NO_DIALPAD|NO_VIDEO."

            print_error(type(exc).__name__, str(exc), tip=tip)
        return 1
