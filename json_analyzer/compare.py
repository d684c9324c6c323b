# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Compute structural differences between two JSON documents."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from .common import ROOT_LABEL, add_output_arguments, add_source_arguments, configure_logging, emit, is_object, join_index, join_key
from .count import count_all_keys
from .format import format_compare
from .source import load_or_exit

logger = logging.getLogger(__name__)

ADDED = "added"
REMOVED = "removed"
CHANGED = "changed"


@dataclass(frozen=True)
class Difference:
    path: str
    kind: str
    old_value: Any = None
    new_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"path": self.path, "kind": self.kind}
        if self.kind != ADDED:
            out["old_value"] = self.old_value
        if self.kind != REMOVED:
            out["new_value"] = self.new_value
        return out


@dataclass(frozen=True)
class CompareResult:
    added: list[Difference] = field(default_factory=list)
    removed: list[Difference] = field(default_factory=list)
    changed: list[Difference] = field(default_factory=list)
    unchanged: int = 0
    total_a: int = 0
    total_b: int = 0

    @property
    def identical(self) -> bool:
        return not (self.added or self.removed or self.changed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "added": [d.to_dict() for d in self.added],
            "removed": [d.to_dict() for d in self.removed],
            "changed": [d.to_dict() for d in self.changed],
            "unchanged": self.unchanged,
            "total_a": self.total_a,
            "total_b": self.total_b,
        }


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality that never crosses JSON types (True is not 1, 1 is 1.0)."""
    if is_number(left) and is_number(right):
        return left == right
    return type(left) is type(right) and left == right


def diff_values(
    left: Any,
    right: Any,
    path: str,
    added: list[Difference],
    removed: list[Difference],
    changed: list[Difference],
) -> int:
    """Walk both values in step, collecting differences. Returns the unchanged leaf count."""
    if is_object(left) and is_object(right):
        unchanged = 0
        # Keys of left in order, then keys new in right.
        for key in list(left) + [k for k in right if k not in left]:
            child_path = join_key(path, key)
            if key not in right:
                removed.append(Difference(child_path, REMOVED, old_value=left[key]))
            elif key not in left:
                added.append(Difference(child_path, ADDED, new_value=right[key]))
            else:
                unchanged += diff_values(left[key], right[key], child_path, added, removed, changed)
        return unchanged

    if isinstance(left, list) and isinstance(right, list):
        unchanged = 0
        for idx in range(max(len(left), len(right))):
            child_path = join_index(path, idx)
            if idx >= len(left):
                added.append(Difference(child_path, ADDED, new_value=right[idx]))
            elif idx >= len(right):
                removed.append(Difference(child_path, REMOVED, old_value=left[idx]))
            else:
                unchanged += diff_values(left[idx], right[idx], child_path, added, removed, changed)
        return unchanged

    if strictly_equal(left, right):
        return 1
    changed.append(Difference(path or ROOT_LABEL, CHANGED, old_value=left, new_value=right))
    return 0


def compare_json(left: Any, right: Any) -> CompareResult:
    """Compare two JSON values key by key and index by index.

    ``total_a``/``total_b`` count every object key in each document on its
    own and are not reconciled with the difference lists.
    """
    added: list[Difference] = []
    removed: list[Difference] = []
    changed: list[Difference] = []
    unchanged = diff_values(left, right, "", added, removed, changed)
    logger.debug("%d added, %d removed, %d changed, %d unchanged", len(added), len(removed), len(changed), unchanged)
    return CompareResult(
        added=added,
        removed=removed,
        changed=changed,
        unchanged=unchanged,
        total_a=count_all_keys(left),
        total_b=count_all_keys(right),
    )


def configure(parser: argparse.ArgumentParser) -> None:
    add_source_arguments(parser, "source_a", "source_b")
    add_output_arguments(parser)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    left = load_or_exit(parser, args.source_a, args.is_file)
    right = load_or_exit(parser, args.source_b, args.is_file)
    result = compare_json(left, right)
    emit(args, result.to_dict(), format_compare(result))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two JSON documents and show differences.")
    configure(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    run(args, parser)


if __name__ == "__main__":
    main()
