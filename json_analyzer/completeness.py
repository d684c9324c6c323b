# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Report how complete each property path is across an array of objects."""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Sequence

from .common import add_output_arguments, add_source_arguments, configure_logging, emit, is_object, join_index, join_key
from .format import format_completeness
from .source import SourceError, load_or_exit, require_array

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 9

SEGMENT_RE = re.compile(r"^(.*?)((?:\[\d+\])*)$")
INDEX_RE = re.compile(r"\[(\d+)\]")

_MISSING = object()


@dataclass(frozen=True)
class CompletenessEntry:
    property: str
    present: int
    missing: int
    present_percent: str
    missing_percent: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.property,
            "present": self.present,
            "missing": self.missing,
            "present_percent": self.present_percent,
            "missing_percent": self.missing_percent,
        }


@dataclass(frozen=True)
class CompletenessResult:
    entries: list[CompletenessEntry] = field(default_factory=list)
    total_objects: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"entries": [e.to_dict() for e in self.entries], "total_objects": self.total_objects}


def collect_paths(value: Any, prefix: str, depth: int, max_depth: int, paths: dict[str, None]) -> None:
    """Add every path under value to paths (an insertion-ordered set).

    Arrays are sampled at element 0 only.
    """
    if depth >= max_depth or value is None:
        return
    if isinstance(value, list):
        if value:
            collect_paths(value[0], join_index(prefix, 0), depth + 1, max_depth, paths)
    elif is_object(value):
        for key, inner in value.items():
            path = join_key(prefix, key)
            paths.setdefault(path)
            collect_paths(inner, path, depth + 1, max_depth, paths)


def value_at_path(obj: Any, path: str) -> Any:
    """Resolve a dot path whose segments may end in [index] suffixes.

    A segment that is only index suffixes applies them to the current value;
    any other segment, the empty one included, is an object key lookup.
    Returns the _MISSING sentinel when any segment cannot be followed.
    """
    current = obj
    for segment in path.split("."):
        key, suffix = SEGMENT_RE.match(segment).groups()
        if key or not suffix:
            if not is_object(current) or key not in current:
                return _MISSING
            current = current[key]
        for index in INDEX_RE.findall(suffix):
            idx = int(index)
            if not isinstance(current, list) or idx >= len(current):
                return _MISSING
            current = current[idx]
    return current


def is_present(obj: Any, path: str) -> bool:
    value = value_at_path(obj, path)
    return value is not _MISSING and value is not None


def percent(count: int, total: int) -> str:
    # Ties round up, on the exact binary value of the float.
    return str(Decimal(count / total * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def analyze_completeness(items: Sequence[Any], max_depth: int = DEFAULT_MAX_DEPTH) -> CompletenessResult:
    """Count, per discovered path, how many items have a non-null value there.

    Paths are discovered from every item (union) up to max_depth levels and
    then checked against every item. Entries are ordered most-missing first;
    ties keep discovery order.
    """
    if not items:
        return CompletenessResult()

    total = len(items)
    paths: dict[str, None] = {}
    for item in items:
        collect_paths(item, "", 0, max_depth, paths)
    logger.debug("discovered %d paths across %d items", len(paths), total)

    entries: list[CompletenessEntry] = []
    for path in paths:
        present = sum(1 for item in items if is_present(item, path))
        missing = total - present
        entries.append(
            CompletenessEntry(
                property=path,
                present=present,
                missing=missing,
                present_percent=percent(present, total),
                missing_percent=percent(missing, total),
            )
        )
    entries.sort(key=lambda entry: entry.missing, reverse=True)
    return CompletenessResult(entries=entries, total_objects=total)


def non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {raw}")
    return value


def configure(parser: argparse.ArgumentParser) -> None:
    add_source_arguments(parser)
    parser.add_argument(
        "--max-depth",
        type=non_negative_int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum nesting depth to discover paths in (default {DEFAULT_MAX_DEPTH}).",
    )
    add_output_arguments(parser)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    data = load_or_exit(parser, args.source, args.is_file)
    try:
        items = require_array(data)
    except SourceError as err:
        parser.error(str(err))
    result = analyze_completeness(items, args.max_depth)
    emit(args, result.to_dict(), format_completeness(result))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Report property completeness across a JSON array of objects.")
    configure(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    run(args, parser)


if __name__ == "__main__":
    main()
