# -*- coding: utf-8 -*-
"""
Report - Plain-text summaries of tool results.

The computation layer returns full-precision values; this module owns
display rounding and produces the text a front end shows or copies to
the clipboard.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import List

# DTK internal
from dtk.core.capacity import CapacityResult
from dtk.core.geo import DistanceResult
from dtk.core.registry import ToolEntry, group_by_category


def distance_summary(result: DistanceResult, decimals: int = 2) -> str:
    """Format a distance as ``"3935.75 km (2445.56 miles)"``."""
    return (
        f"{result.kilometers:.{decimals}f} km "
        f"({result.miles:.{decimals}f} miles)"
    )


def capacity_summary(result: CapacityResult, rate_decimals: int = 6) -> str:
    """Multi-line summary of a capacity estimate.

    Parameters
    ----------
    result : CapacityResult
    rate_decimals : int
        Decimal places for the per-second rates.

    Returns
    -------
    str
    """
    lines: List[str] = [
        "Back of the Envelope Calculations Results:",
        "",
        f"Read per second: {result.reads_per_second:.{rate_decimals}f} rps",
        f"Write per second: {result.writes_per_second:.{rate_decimals}f} tps",
        "",
        "Storage used per year (calculated from Write per second):",
    ]
    for unit, value in result.storage_breakdown:
        if unit == "Bytes":
            lines.append(f"{value:.0f} {unit}")
        else:
            lines.append(f"{value:.2f} {unit}")
    return "\n".join(lines)


def tool_listing(tools: List[ToolEntry]) -> str:
    """Tools grouped under their category headings."""
    lines: List[str] = []
    for category, entries in group_by_category(tools).items():
        lines.append(f"{category}:")
        for tool in entries:
            lines.append(f"  {tool.key:<10} {tool.name} - {tool.description}")
    return "\n".join(lines)


__all__ = ["capacity_summary", "distance_summary", "tool_listing"]
