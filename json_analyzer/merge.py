# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Merge an array of JSON objects into one object, last key wins."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from .common import add_output_arguments, add_source_arguments, configure_logging, emit, is_object
from .format import format_merge
from .source import SourceError, load_or_exit, require_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeResult:
    merged: dict[str, Any] = field(default_factory=dict)
    total_objects: int = 0
    total_keys: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"merged": self.merged, "total_objects": self.total_objects, "total_keys": self.total_keys}


def shallow_merge(objs: Sequence[Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for obj in objs:
        if is_object(obj):
            out.update(obj)
    return out


def merge_all(items: Sequence[Any]) -> MergeResult:
    """Shallow-merge every object in items; non-objects are skipped.

    ``total_objects`` is the length of items, objects or not.
    """
    if not items:
        return MergeResult()
    merged = shallow_merge(items)
    skipped = sum(1 for item in items if not is_object(item))
    if skipped:
        logger.debug("skipped %d non-object elements", skipped)
    return MergeResult(merged=merged, total_objects=len(items), total_keys=len(merged))


def configure(parser: argparse.ArgumentParser) -> None:
    add_source_arguments(parser)
    add_output_arguments(parser)


def run(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    data = load_or_exit(parser, args.source, args.is_file)
    try:
        items = require_array(data)
    except SourceError as err:
        parser.error(str(err))
    result = merge_all(items)
    emit(args, result.to_dict(), format_merge(result))


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Merge all objects of a JSON array into one object.")
    configure(parser)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    run(args, parser)


if __name__ == "__main__":
    main()
