# -*- coding: utf-8 -*-
"""
Tool Registry - Catalog of DTK tools with category grouping and search.

Front ends (the GUI sidebar, the CLI ``tools`` command) list tools from
this catalog and narrow it with the same case-insensitive search over
tool name and category.

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
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True)
class ToolEntry:
    """One tool in the catalog.

    Attributes
    ----------
    key : str
        Stable identifier, also the CLI subcommand name.
    name : str
        Display name.
    category : str
        Sidebar group.
    description : str
        One-line summary.
    """

    key: str
    name: str
    category: str
    description: str = ""


TOOLS: List[ToolEntry] = [
    ToolEntry("base64", "Base64", "Encoders / Decoders",
              "Encode text to Base64 or decode it back"),
    ToolEntry("url", "URL Encode", "Encoders / Decoders",
              "Form-urlencode text or decode it back"),
    ToolEntry("hash", "Hash", "Encoders / Decoders",
              "MD5, SHA-256 and SHA-512 digests"),
    ToolEntry("uuid", "UUID", "Generators",
              "Random version 4 UUIDs"),
    ToolEntry("ulid", "ULID", "Generators",
              "Lexicographically sortable unique IDs"),
    ToolEntry("json", "JSON Formatter", "Formatters",
              "Pretty-print or minify JSON"),
    ToolEntry("distance", "Haversine Distance", "Calculators",
              "Great-circle distance between two coordinates"),
    ToolEntry("capacity", "System Estimator", "System Design",
              "Back-of-the-envelope traffic and storage projection"),
]


def search_tools(
    query: str = "",
    tools: Optional[Sequence[ToolEntry]] = None,
) -> List[ToolEntry]:
    """Return tools whose name or category contains ``query``.

    Matching is case-insensitive. An empty or blank query returns every
    tool. Catalog order is preserved.

    Parameters
    ----------
    query : str
    tools : Optional[Sequence[ToolEntry]]
        Catalog to search. Defaults to ``TOOLS``.

    Returns
    -------
    List[ToolEntry]
    """
    tools = TOOLS if tools is None else tools
    needle = query.strip().lower()
    if not needle:
        return list(tools)
    return [
        t for t in tools
        if needle in t.name.lower() or needle in t.category.lower()
    ]


def group_by_category(
    tools: Sequence[ToolEntry],
) -> Dict[str, List[ToolEntry]]:
    """Group tools by category, categories in first-seen order."""
    groups: Dict[str, List[ToolEntry]] = {}
    for tool in tools:
        groups.setdefault(tool.category, []).append(tool)
    return groups


def get_tool(key: str) -> ToolEntry:
    """Look up a tool by key.

    Raises
    ------
    KeyError
        If no tool has this key.
    """
    for tool in TOOLS:
        if tool.key == key:
            return tool
    raise KeyError(f"Unknown tool {key!r}")
