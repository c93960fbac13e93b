# -*- coding: utf-8 -*-
"""
Digest - Cryptographic hashes of text input.

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
import hashlib
from enum import Enum


class HashAlgorithm(Enum):
    """Supported digest algorithms, valued by their ``hashlib`` name."""

    MD5 = "md5"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def label(self) -> str:
        """Display name, e.g. ``"SHA-256"``."""
        return {
            HashAlgorithm.MD5: "MD5",
            HashAlgorithm.SHA256: "SHA-256",
            HashAlgorithm.SHA512: "SHA-512",
        }[self]

    @classmethod
    def from_name(cls, name: str) -> 'HashAlgorithm':
        """Resolve a user-typed name such as ``"SHA-256"`` or ``"md5"``.

        Raises
        ------
        ValueError
            If the name matches no supported algorithm.
        """
        key = name.strip().lower().replace("-", "").replace("_", "")
        for algorithm in cls:
            if algorithm.value == key:
                return algorithm
        raise ValueError(
            f"Unknown hash algorithm {name!r}; expected one of "
            f"{', '.join(a.label for a in cls)}"
        )


def hash_text(text: str, algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> str:
    """Lowercase hex digest of the UTF-8 encoding of ``text``."""
    return hashlib.new(algorithm.value, text.encode("utf-8")).hexdigest()
