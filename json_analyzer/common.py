# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Shared helpers for json-analyzer tools: the path model and JSON output."""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import Any

ROOT_LABEL = "(root)"

PATH_TOKEN_RE = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def is_object(value: Any) -> bool:
    """Return true for JSON objects only; arrays are not objects."""
    return isinstance(value, dict)


def join_key(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def join_index(path: str, index: int) -> str:
    return f"{path}[{index}]"


def parse_path(path: str) -> list[str | int]:
    """Parse dot path syntax with array indices into key/index tokens."""
    if not path or path == ROOT_LABEL:
        return []
    tokens: list[str | int] = []
    for match in PATH_TOKEN_RE.finditer(path):
        key = match.group(1)
        index = match.group(2)
        if key is not None:
            tokens.append(key)
        elif index is not None:
            tokens.append(int(index))
    return tokens


def resolve_path(data: Any, path: str) -> tuple[bool, Any]:
    """Resolve a path against data, returning (found, value)."""
    current = data
    for token in parse_path(path):
        if isinstance(token, int):
            if not isinstance(current, list) or token >= len(current):
                return False, None
            current = current[token]
        else:
            if not is_object(current) or token not in current:
                return False, None
            current = current[token]
    return True, current


def type_name(value: Any) -> str:
    """Map python value to a JSON-like type name."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def write_json(data: Any, compact: bool = False) -> None:
    """Write JSON to stdout with deterministic formatting."""
    if compact:
        json.dump(data, sys.stdout, ensure_ascii=False, separators=(",", ":"))
    else:
        json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def add_source_arguments(parser: argparse.ArgumentParser, *names: str) -> None:
    """Add source positionals plus the file/literal mode switches."""
    for name in names or ("source",):
        parser.add_argument(name, help="JSON text, file path, or '-' for stdin.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-f", "--file", dest="is_file", action="store_const", const=True, help="Treat sources as file paths.")
    mode.add_argument("-s", "--string", dest="is_file", action="store_const", const=False, help="Treat sources as literal JSON text.")


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    parser.add_argument("--compact", action="store_true", help="Emit compact JSON output.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def emit(args: argparse.Namespace, data: dict[str, Any], text: str) -> None:
    """Print a result as rendered text or as JSON, per --format."""
    if args.format == "text":
        print(text)
    else:
        write_json(data, compact=args.compact)
