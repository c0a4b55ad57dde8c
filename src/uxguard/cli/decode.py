from __future__ import annotations

import argparse
import json

from uxguard.models.restrictions import AppFunction, RestrictionSnapshot
from uxguard.policy.decoder import decode
from uxguard.restrictions.flags import parse_flags


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "decode", help="Show the functions blocked by a restriction mask"
    )
    parser.set_defaults(func=run_decode)
    parser.add_argument(
        "flags",
        help="Restriction mask: an integer (17, 0x11) or names (NO_DIALPAD|NO_VIDEO)",
    )
    parser.add_argument(
        "--no-optimization",
        dest="requires_optimization",
        action="store_false",
        default=True,
        help="Distraction optimization is not required (nothing gets blocked)",
    )
    parser.add_argument("--json", action="store_true", help="Print blocked functions as JSON")


def run_decode(args: argparse.Namespace) -> int:
    from rich.table import Table

    from uxguard.cli.ui import console, print_success

    snapshot = RestrictionSnapshot(
        active_flags=parse_flags(args.flags),
        requires_optimization=args.requires_optimization,
    )
    blocked = decode(snapshot)
    ordered = [function for function in AppFunction if function in blocked]

    if args.json:
        print(json.dumps([function.value for function in ordered]))
        return 0

    if not ordered:
        print_success("No function blocked")
        return 0

    table = Table(title=f"Blocked functions (mask {snapshot.active_flags})")
    table.add_column("Function", style="bold")
    table.add_column("Label")
    for function in ordered:
        table.add_row(function.value, function.label)
    console.print(table)
    return 0
