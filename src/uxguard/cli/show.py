from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from uxguard.cli.truncate import max_length_arg
from uxguard.config import SourceKind, load_settings
from uxguard.render.screen import ScreenPrinter
from uxguard.restrictions.flags import parse_flags
from uxguard.sources import ScriptedRestrictionSource, build_source
from uxguard.state.blocked import BlockedFunctionState


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "show", help="Render the driver screen and follow restriction updates"
    )
    parser.set_defaults(func=run_show)
    parser.add_argument("--config", type=Path, help="Path to uxguard.toml")

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--flags",
        help="Use a fixed restriction mask (integer or NO_DIALPAD|NO_VIDEO ...)",
    )
    source_group.add_argument(
        "--script",
        type=Path,
        help="Replay restriction snapshots from a JSON script",
    )
    source_group.add_argument(
        "--unavailable",
        action="store_true",
        help="Simulate a host without the restriction service",
    )

    parser.add_argument(
        "--optimization",
        dest="requires_optimization",
        action="store_true",
        default=None,
        help="Distraction optimization is required (default when --flags is given)",
    )
    parser.add_argument(
        "--no-optimization",
        dest="requires_optimization",
        action="store_false",
        help="Distraction optimization is not required",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between scripted updates",
    )
    parser.add_argument("--max-length", type=max_length_arg, help="Maximum length of long text")


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {
        "max_text_length": args.max_length,
        "interval": args.interval,
        "requires_optimization": args.requires_optimization,
    }

    if args.unavailable:
        overrides["kind"] = SourceKind.unavailable
    elif args.script is not None:
        overrides["kind"] = SourceKind.scripted
        overrides["script"] = args.script
    elif args.flags is not None:
        overrides["kind"] = SourceKind.static
        overrides["active_flags"] = parse_flags(args.flags)
        if args.requires_optimization is None:
            overrides["requires_optimization"] = True

    return overrides


def run_show(args: argparse.Namespace) -> int:
    from uxguard.cli.ui import console

    settings = load_settings(args.config, cli_overrides=_cli_overrides(args))
    source = build_source(settings.source)

    state = BlockedFunctionState()
    printer = ScreenPrinter(
        console,
        info_text=settings.display.info_text,
        max_length=settings.display.max_text_length,
    )
    state.subscribe(printer)

    try:
        if not state.attach(source):
            console.print(
                "[info]Restriction service unavailable; running without restrictions.[/info]"
            )
            return 0

        if isinstance(source, ScriptedRestrictionSource):
            source.play(interval=settings.source.interval)
    finally:
        state.detach()

    return 0
