# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Count properties in a JSON object, top-level and at every nesting level."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from .common import add_output_arguments, add_source_arguments, configure_logging, emit, is_object
from .format import format_count
from .source import load_or_exit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CountResult:
    top_level: int = 0
    total: int = 0
    breakdown: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"top_level": self.top_level, "total": self.total, "breakdown": dict(self.breakdown)}


def count_all_keys(value: Any) -> int:
    """Count every key at every nesting level inside value.

    Walks with an explicit stack, so nesting depth is not limited by recursion.
    """
    total = 0
    stack = [value]
    while stack:
        current = stack.pop()
        if is_object(current):
            total += len(current)
            stack.extend(current.values())
        elif isinstance(current, list):
            stack.extend(current)
    return total


def count_properties(value: Any) -> CountResult:
    """Count top-level keys and all nested keys, with a per-key breakdown.

    Non-object roots (arrays included) count as zero properties.
    """
    if not is_object(value):
        return CountResult()

    breakdown = {key: count_all_keys(inner) for key, inner in value.items()}
    total = len(value) + sum(breakdown.values())
    logger.debug("counted %d top-level and %d total properties", len(value), total)
    return CountResult(top_level=len(value), total=total, breakdown=breakdown)


def configure(parser: argparse.ArgumentParser) -> None:
    add_source_arguments(parser)
    add_output_arguments(parser)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    data = load_or_exit(parser, args.source, args.is_file)
    result = count_properties(data)
    emit(args, result.to_dict(), format_count(result))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count properties in a JSON object (top-level and total).")
    configure(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    run(args, parser)


if __name__ == "__main__":
    main()
