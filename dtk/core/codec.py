# -*- coding: utf-8 -*-
"""
Codec - Base64 and URL text transforms.

Base64 uses the standard alphabet with ``=`` padding. Decoding is strict
and all-or-nothing: framing is checked before any bytes are produced,
so a failure never yields a partial result. URL encoding follows the
``application/x-www-form-urlencoded`` rules (spaces become ``+``).

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
import base64
import binascii
import logging
import string
from typing import Union
from urllib.parse import quote_plus, unquote_to_bytes

# DTK internal
from dtk.core.errors import DecodeError, DecodeErrorKind

logger = logging.getLogger(__name__)

_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_PAD = "="


def encode(data: Union[str, bytes]) -> str:
    """Encode text or bytes as padded standard Base64.

    Parameters
    ----------
    data : Union[str, bytes]
        Text is encoded as UTF-8 before conversion.

    Returns
    -------
    str
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return base64.b64encode(raw).decode("ascii")


def _check_framing(text: str) -> None:
    """Raise DecodeError if ``text`` is not well-framed Base64."""
    first_pad = text.find(_PAD)
    for i, ch in enumerate(text):
        if ch == _PAD:
            continue
        if ch not in _ALPHABET:
            raise DecodeError(
                DecodeErrorKind.INVALID_CHARACTER,
                f"Invalid Base64 character {ch!r} at position {i}",
                position=i,
            )
        if first_pad != -1 and i > first_pad:
            raise DecodeError(
                DecodeErrorKind.INVALID_CHARACTER,
                f"Padding character at non-terminal position {first_pad}",
                position=first_pad,
            )

    if len(text) % 4 != 0:
        raise DecodeError(
            DecodeErrorKind.INVALID_PADDING,
            f"Base64 length must be a multiple of 4, got {len(text)}",
        )
    pad_count = len(text) - len(text.rstrip(_PAD))
    if pad_count > 2:
        raise DecodeError(
            DecodeErrorKind.INVALID_PADDING,
            f"Too many padding characters ({pad_count})",
        )


def decode(text: str, as_text: bool = True) -> Union[str, bytes]:
    """Decode padded standard Base64.

    Parameters
    ----------
    text : str
        Base64 input. Whitespace is not accepted.
    as_text : bool
        If True, interpret the decoded bytes as UTF-8 and return ``str``.
        If False, return the raw ``bytes``.

    Returns
    -------
    Union[str, bytes]

    Raises
    ------
    DecodeError
        ``INVALID_CHARACTER`` for characters outside the alphabet
        (including ``=`` before the end), ``INVALID_PADDING`` for bad
        length or padding or nonzero trailing bits, ``INVALID_UTF8`` when ``as_text`` is set and
        the bytes are not UTF-8.
    """
    _check_framing(text)
    try:
        raw = base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise DecodeError(DecodeErrorKind.INVALID_PADDING, str(e)) from e
    # Unused bits in the last quantum must be zero ("QR==" is not "QQ==")
    if base64.b64encode(raw).decode("ascii") != text:
        raise DecodeError(
            DecodeErrorKind.INVALID_PADDING,
            "Non-canonical Base64: trailing bits before padding are not zero",
        )

    logger.debug("Decoded %d Base64 chars to %d bytes", len(text), len(raw))
    if not as_text:
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(
            DecodeErrorKind.INVALID_UTF8,
            f"Decoded bytes are not valid UTF-8 (byte {e.start})",
            position=e.start,
        ) from e


def url_encode(text: str) -> str:
    """Form-urlencode ``text`` (UTF-8, space as ``+``)."""
    return quote_plus(text, safe="")


def url_decode(text: str) -> str:
    """Reverse :func:`url_encode`.

    Malformed ``%`` escapes are kept literally, as browsers do.

    Raises
    ------
    DecodeError
        ``INVALID_UTF8`` if the escaped bytes are not valid UTF-8.
    """
    raw = unquote_to_bytes(text.replace("+", " "))
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(
            DecodeErrorKind.INVALID_UTF8,
            f"Percent-escaped bytes are not valid UTF-8 (byte {e.start})",
            position=e.start,
        ) from e
