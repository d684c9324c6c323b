# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Render analysis results as human-readable text."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .compare import CompareResult
    from .completeness import CompletenessResult
    from .count import CountResult
    from .depth import DepthResult
    from .merge import MergeResult

RULE = "  " + "─" * 40
BAR_LIMIT = 30
INLINE_VALUE_LIMIT = 60


def indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def pretty(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2)


def inline(value: Any) -> str:
    """Short single-line rendering for diff listings."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (dict, list)):
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        return text if len(text) <= INLINE_VALUE_LIMIT else text[: INLINE_VALUE_LIMIT - 3] + "…"
    return json.dumps(value)


def header(title: str) -> list[str]:
    return ["", f"  {title}", RULE]


def format_count(result: CountResult) -> str:
    lines = header("Property Count")
    lines.append(f"  Top-level properties:  {result.top_level}")
    lines.append(f"  Total properties:      {result.total}")
    if result.breakdown:
        lines.append("")
        lines.append("  Per-key breakdown:")
        for key, count in result.breakdown.items():
            bar = "█" * min(count, BAR_LIMIT)
            lines.append(f"    {key}  {bar}  {count} nested")
    lines.append("")
    return "\n".join(lines)


def format_depth(result: DepthResult) -> str:
    lines = header("Depth Analysis")
    lines.append(f"  Max depth:  {result.max_depth}")
    lines.append(f"  Deepest path:  {result.path}")
    lines.append("")
    lines.append("  Value at deepest path:")
    lines.append(indent(pretty(result.value_at_path)))
    lines.append("")
    return "\n".join(lines)


def format_compare(result: CompareResult) -> str:
    lines = header("JSON Comparison")
    lines.append(f"  Keys in A: {result.total_a}    Keys in B: {result.total_b}")
    lines.append(
        f"  +{len(result.added)} added  -{len(result.removed)} removed  "
        f"~{len(result.changed)} changed  ={result.unchanged} unchanged"
    )
    if result.added:
        lines += ["", "  Added"]
        lines += [f"    + {d.path}  -> {inline(d.new_value)}" for d in result.added]
    if result.removed:
        lines += ["", "  Removed"]
        lines += [f"    - {d.path}  -> {inline(d.old_value)}" for d in result.removed]
    if result.changed:
        lines += ["", "  Changed"]
        lines += [f"    ~ {d.path}  {inline(d.old_value)} -> {inline(d.new_value)}" for d in result.changed]
    if result.identical:
        lines += ["", "  Objects are identical"]
    lines.append("")
    return "\n".join(lines)


def format_merge(result: MergeResult) -> str:
    lines = header("Merged Object")
    lines.append(f"  Objects merged:  {result.total_objects}")
    lines.append(f"  Distinct keys:   {result.total_keys}")
    lines.append("")
    lines.append(indent(pretty(result.merged)))
    lines.append("")
    return "\n".join(lines)


def format_completeness(result: CompletenessResult) -> str:
    lines = header("Property Completeness")
    lines.append(f"  Objects analyzed:  {result.total_objects}")
    lines.append(f"  Paths found:       {len(result.entries)}")
    if result.entries:
        width = max(len("property"), *(len(e.property) for e in result.entries))
        lines.append("")
        lines.append(f"    {'property':<{width}}  {'present':>7}  {'missing':>7}  {'present%':>8}  {'missing%':>8}")
        for e in result.entries:
            lines.append(
                f"    {e.property:<{width}}  {e.present:>7}  {e.missing:>7}  "
                f"{e.present_percent:>8}  {e.missing_percent:>8}"
            )
    lines.append("")
    return "\n".join(lines)
