# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Command-line entry point: ``jt <command> [options]``."""

from __future__ import annotations

import argparse
from typing import Sequence

from . import __version__, compare, completeness, count, depth, merge
from .common import configure_logging

COMMANDS = {
    "count": (count, "Count properties in a JSON object (top-level and total)."),
    "depth": (depth, "Find the maximum nesting depth and the value at the deepest path."),
    "compare": (compare, "Compare two JSON documents and show differences."),
    "merge": (merge, "Merge all objects of a JSON array into one object (last key wins)."),
    "completeness": (completeness, "Report property completeness across a JSON array of objects."),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jt",
        description="Analyze JSON documents: count properties, measure depth, compare, merge and check completeness.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)
    for name, (module, help_text) in COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        module.configure(sub)
        sub.set_defaults(handler=module.run, command_parser=sub)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    args.handler(args, args.command_parser)


if __name__ == "__main__":
    main()
