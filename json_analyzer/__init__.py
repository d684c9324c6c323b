# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Analyze JSON documents: count properties, measure depth, diff, merge and check completeness."""

from .compare import CompareResult, Difference, compare_json
from .completeness import CompletenessEntry, CompletenessResult, analyze_completeness
from .count import CountResult, count_properties
from .depth import DepthResult, analyze_depth
from .merge import MergeResult, merge_all

__version__ = "1.0.0"

__all__ = [
    "CompareResult",
    "CompletenessEntry",
    "CompletenessResult",
    "CountResult",
    "DepthResult",
    "Difference",
    "MergeResult",
    "analyze_completeness",
    "analyze_depth",
    "compare_json",
    "count_properties",
    "merge_all",
]
