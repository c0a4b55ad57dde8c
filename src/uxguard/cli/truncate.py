from __future__ import annotations

import argparse

from uxguard.policy.truncation import DEFAULT_MAX_TEXT_LENGTH, truncate_text


def max_length_arg(value: str) -> int:
    length = int(value)
    if length < 4:
        raise argparse.ArgumentTypeError("max length must be at least 4")
    return length


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("truncate", help="Shorten text the way the driver screen does")
    parser.set_defaults(func=run_truncate)
    parser.add_argument("text", help="Text to shorten")
    parser.add_argument(
        "--max-length",
        type=max_length_arg,
        default=DEFAULT_MAX_TEXT_LENGTH,
        help=f"Maximum length including the '...' marker (default {DEFAULT_MAX_TEXT_LENGTH})",
    )


def run_truncate(args: argparse.Namespace) -> int:
    print(truncate_text(args.text, args.max_length))
    return 0
