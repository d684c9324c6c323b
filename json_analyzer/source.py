# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Resolve a command-line source into a parsed JSON value."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .common import type_name

logger = logging.getLogger(__name__)

PREVIEW_LIMIT = 80
ARRAY_REQUIRED = "Input must be a JSON array of objects"


class SourceError(ValueError):
    """Raised when a source cannot be read or does not hold valid JSON."""


def looks_like_file(source: str) -> bool:
    """Guess whether source names a file rather than holding JSON text."""
    if source.lower().endswith(".json"):
        return True
    try:
        return Path(source).is_file()
    except (OSError, ValueError):
        # Long literals or embedded NULs are not valid paths.
        return False


def read_text(source: str, is_file: bool | None = None) -> str:
    if source == "-":
        return sys.stdin.read()
    if is_file is None:
        is_file = looks_like_file(source)
    if not is_file:
        return source
    path = Path(source).resolve()
    logger.debug("reading JSON from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        reason = err.strerror if isinstance(err, OSError) and err.strerror else str(err)
        raise SourceError(f'Could not read file "{path}": {reason}') from err


def preview(text: str) -> str:
    return text if len(text) <= PREVIEW_LIMIT else text[:PREVIEW_LIMIT] + "…"


def load_source(source: str, is_file: bool | None = None) -> Any:
    """Load JSON from stdin ('-'), a file path, or literal JSON text.

    ``is_file`` forces file mode (True) or literal mode (False); None
    auto-detects by the ``.json`` extension or an existing file.
    """
    text = read_text(source, is_file)
    try:
        value = json.loads(text)
    except json.JSONDecodeError as err:
        raise SourceError(
            f"Invalid JSON: {preview(text)} ({err.msg} at line {err.lineno} column {err.colno})"
        ) from err
    logger.debug("parsed %s from %d characters", type_name(value), len(text))
    return value


def require_array(value: Any) -> list[Any]:
    """Return value when it is a JSON array, otherwise raise SourceError."""
    if not isinstance(value, list):
        raise SourceError(ARRAY_REQUIRED)
    return value


def load_or_exit(parser: argparse.ArgumentParser, source: str, is_file: bool | None) -> Any:
    """Load a source for a CLI command, reporting failures as usage errors."""
    try:
        return load_source(source, is_file)
    except SourceError as err:
        parser.error(str(err))
