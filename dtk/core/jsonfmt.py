# -*- coding: utf-8 -*-
"""
JSON Formatter - Pretty-print and minify JSON documents.

Key order and non-ASCII text are preserved. Parse failures are reported
as ``JsonFormatError`` with the 1-based line and column of the problem.

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
import json
from typing import Any

# DTK internal
from dtk.core.errors import JsonFormatError


def _load(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonFormatError(
            f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}",
            line=e.lineno,
            column=e.colno,
        ) from e


def format_json(text: str, indent: int = 2) -> str:
    """Parse ``text`` and return it pretty-printed.

    Parameters
    ----------
    text : str
        JSON document.
    indent : int
        Spaces per nesting level.

    Returns
    -------
    str

    Raises
    ------
    JsonFormatError
        If ``text`` is not valid JSON.
    """
    return json.dumps(_load(text), indent=indent, ensure_ascii=False)


def minify_json(text: str) -> str:
    """Parse ``text`` and return it with all insignificant whitespace removed.

    Raises
    ------
    JsonFormatError
        If ``text`` is not valid JSON.
    """
    return json.dumps(_load(text), separators=(",", ":"), ensure_ascii=False)
