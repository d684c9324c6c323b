# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Find the maximum nesting depth of a JSON value and what sits there."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

from .common import ROOT_LABEL, add_output_arguments, add_source_arguments, configure_logging, emit, is_object, join_index, join_key
from .format import format_depth
from .source import load_or_exit

logger = logging.getLogger(__name__)

Deepest = Tuple[int, str, Any]


@dataclass(frozen=True)
class DepthResult:
    max_depth: int
    path: str
    value_at_path: Any

    def to_dict(self) -> dict[str, Any]:
        return {"max_depth": self.max_depth, "path": self.path, "value_at_path": self.value_at_path}


def is_container(value: Any) -> bool:
    """Non-empty objects and arrays are containers; everything else is a leaf."""
    return isinstance(value, (dict, list)) and len(value) > 0


def children(value: Any, path: str) -> Iterator[tuple[str, Any]]:
    if is_object(value):
        for key, inner in value.items():
            yield join_key(path, key), inner
    elif isinstance(value, list):
        for idx, inner in enumerate(value):
            yield join_index(path, idx), inner


def deepest(value: Any, path: str, depth: int, best: Deepest) -> Deepest:
    # Strictly greater: the first node reached at the maximum depth wins.
    if depth > best[0]:
        best = (depth, path or ROOT_LABEL, value)
    for child_path, child in children(value, path):
        best = deepest(child, child_path, depth + 1, best)
    return best


def analyze_depth(value: Any) -> DepthResult:
    """Return the maximum nesting depth, the path to the deepest node and its value.

    Depth 0 is the root itself (a primitive or an empty object/array); each
    descent into an object key or array index adds one.
    """
    if not is_container(value):
        return DepthResult(max_depth=0, path=ROOT_LABEL, value_at_path=value)

    max_depth, path, found = deepest(value, "", 0, (0, ROOT_LABEL, value))
    logger.debug("max depth %d at %s", max_depth, path)
    return DepthResult(max_depth=max_depth, path=path, value_at_path=found)


def configure(parser: argparse.ArgumentParser) -> None:
    add_source_arguments(parser)
    add_output_arguments(parser)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    data = load_or_exit(parser, args.source, args.is_file)
    result = analyze_depth(data)
    emit(args, result.to_dict(), format_depth(result))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the maximum nesting depth and the value at the deepest path.")
    configure(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    run(args, parser)


if __name__ == "__main__":
    main()
