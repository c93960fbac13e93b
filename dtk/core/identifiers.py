# -*- coding: utf-8 -*-
"""
Identifiers - Random unique identifier generation.

UUIDs are version 4 (fully random). ULIDs put a 48-bit millisecond
timestamp ahead of 80 random bits and render as 26 Crockford Base32
characters, so identifiers generated in different milliseconds sort
lexicographically by creation time.

Dependencies
------------
python-ulid

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
import uuid
from typing import Callable, List

# Third-party
from ulid import ULID


def generate_uuid() -> str:
    """Return a random (version 4) UUID in canonical hyphenated form."""
    return str(uuid.uuid4())


def generate_ulid() -> str:
    """Return a new ULID as 26 uppercase Crockford Base32 characters."""
    return str(ULID())


def _generate_many(factory: Callable[[], str], count: int) -> List[str]:
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    return [factory() for _ in range(count)]


def generate_uuids(count: int) -> List[str]:
    """Return ``count`` fresh version 4 UUIDs.

    Parameters
    ----------
    count : int
        Number of identifiers, at least 1.

    Returns
    -------
    List[str]
    """
    return _generate_many(generate_uuid, count)


def generate_ulids(count: int) -> List[str]:
    """Return ``count`` fresh ULIDs. ``count`` must be at least 1."""
    return _generate_many(generate_ulid, count)
