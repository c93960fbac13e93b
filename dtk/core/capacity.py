# -*- coding: utf-8 -*-
"""
Capacity Estimator - Back-of-the-envelope traffic and storage projection.

Turns a daily active user count, a read:write ratio and a payload size
into requests per second and yearly storage growth. The ratio sets the
share of daily users generating reads versus writes; storage grows with
writes only. All inputs are validated before any arithmetic, and all
arithmetic is done in floating point at full precision. Display
rounding is left to the caller.

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
import logging
import math
import re
from dataclasses import dataclass
from typing import List, Tuple

# DTK internal
from dtk.core.errors import (
    NumericErrorKind,
    NumericParseError,
    RatioErrorKind,
    RatioParseError,
)

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_DAY = SECONDS_PER_MINUTE * MINUTES_PER_HOUR * HOURS_PER_DAY
DAYS_PER_YEAR = 365

STORAGE_UNITS: Tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB", "PB")

_DIGITS = re.compile(r"^[0-9]+$")

# Largest product of inputs the float arithmetic in estimate() accepts
_MAX_MAGNITUDE = 10 ** 300
_MAX_DIGITS = len(str(_MAX_MAGNITUDE))

DAU_FIELD = "Daily Active User number"
PAYLOAD_FIELD = "data size"


@dataclass(frozen=True)
class ReadWriteRatio:
    """Reads per write, both strictly positive.

    Attributes
    ----------
    read : int
    write : int
    """

    read: int
    write: int

    def __post_init__(self) -> None:
        if self.read < 0 or self.write < 0:
            raise RatioParseError(
                RatioErrorKind.MALFORMED_FORMAT,
                f"Ratio components must not be negative, got {self}",
            )
        if self.read == 0 or self.write == 0:
            raise RatioParseError(
                RatioErrorKind.ZERO_COMPONENT,
                f"Ratio components must be non-zero, got {self}",
            )
        if self.total > _MAX_MAGNITUDE:
            raise RatioParseError(
                RatioErrorKind.MALFORMED_FORMAT,
                "Ratio components are too large",
            )

    @property
    def total(self) -> int:
        return self.read + self.write

    def __str__(self) -> str:
        return f"{self.read}:{self.write}"


@dataclass(frozen=True)
class CapacityInputs:
    """Validated estimator inputs.

    Attributes
    ----------
    dau : int
        Daily active users, non-negative.
    ratio : ReadWriteRatio
    payload_bytes : int
        Size of one written record in bytes, non-negative.
    """

    dau: int
    ratio: ReadWriteRatio
    payload_bytes: int

    def __post_init__(self) -> None:
        if self.dau < 0 or self.payload_bytes < 0:
            raise ValueError(
                f"dau and payload_bytes must be non-negative, got "
                f"{self.dau} and {self.payload_bytes}"
            )
        if self.dau * self.ratio.total > _MAX_MAGNITUDE:
            raise NumericParseError(
                DAU_FIELD, str(self.dau), NumericErrorKind.OUT_OF_RANGE,
            )
        if (
            self.payload_bytes > _MAX_MAGNITUDE
            or self.dau * self.payload_bytes * DAYS_PER_YEAR > _MAX_MAGNITUDE
        ):
            raise NumericParseError(
                PAYLOAD_FIELD,
                str(self.payload_bytes),
                NumericErrorKind.OUT_OF_RANGE,
            )


@dataclass(frozen=True)
class CapacityResult:
    """Projected load and storage.

    Attributes
    ----------
    reads_per_second : float
    writes_per_second : float
    storage_per_year_bytes : float
    storage_breakdown : Tuple[Tuple[str, float], ...]
        ``storage_per_year_bytes`` in every unit from Bytes to PB.
    """

    reads_per_second: float
    writes_per_second: float
    storage_per_year_bytes: float
    storage_breakdown: Tuple[Tuple[str, float], ...]


def parse_ratio(text: str) -> ReadWriteRatio:
    """Parse a ``"R:W"`` ratio such as ``"10:1"``.

    Whitespace around the text and around each side is ignored.

    Parameters
    ----------
    text : str

    Returns
    -------
    ReadWriteRatio

    Raises
    ------
    RatioParseError
        ``MALFORMED_FORMAT`` if there is no colon, not exactly two parts,
        or a part that is not an unsigned integer. ``ZERO_COMPONENT`` if
        either side is zero.
    """
    parts = [p.strip() for p in text.strip().split(":")]
    if len(parts) != 2:
        raise RatioParseError(
            RatioErrorKind.MALFORMED_FORMAT,
            "Invalid ratio format. Use format like '1:1' or '10:1'",
        )

    read_text, write_text = parts
    for label, part in (("read", read_text), ("write", write_text)):
        if not _DIGITS.match(part):
            raise RatioParseError(
                RatioErrorKind.MALFORMED_FORMAT,
                f"Invalid {label} ratio: {part!r}",
            )
        if len(part.lstrip("0")) > _MAX_DIGITS:
            raise RatioParseError(
                RatioErrorKind.MALFORMED_FORMAT,
                f"The {label} ratio is too large",
            )

    return ReadWriteRatio(read=int(read_text), write=int(write_text))


def parse_count(text: str, field: str) -> int:
    """Parse a non-negative integer typed into ``field``.

    Raises
    ------
    NumericParseError
        ``NOT_A_NUMBER`` if ``text`` is not an unsigned decimal integer,
        ``OUT_OF_RANGE`` if it is too large to compute with.
    """
    stripped = text.strip()
    if not _DIGITS.match(stripped):
        raise NumericParseError(field, text)
    if len(stripped.lstrip("0")) > _MAX_DIGITS:
        raise NumericParseError(field, stripped, NumericErrorKind.OUT_OF_RANGE)
    return int(stripped)


def parse_inputs(
    dau_text: str,
    ratio_text: str,
    payload_text: str,
) -> CapacityInputs:
    """Validate every raw estimator field.

    Fields are checked in order (DAU, ratio, payload), then the DAU and
    payload are checked together against the range the float arithmetic
    can represent. The first failure is raised, so no computation ever
    sees partial or unrepresentable input.
    """
    dau = parse_count(dau_text, DAU_FIELD)
    ratio = parse_ratio(ratio_text)
    payload = parse_count(payload_text, PAYLOAD_FIELD)
    return CapacityInputs(dau=dau, ratio=ratio, payload_bytes=payload)


def format_storage(num_bytes: float) -> List[Tuple[str, float]]:
    """Express a byte count in every unit of the base-1024 ladder.

    Each value is ``num_bytes / 1024**n`` computed from the original
    count, never from the previous rung.

    Parameters
    ----------
    num_bytes : float
        Non-negative, finite byte count.

    Returns
    -------
    List[Tuple[str, float]]
        ``[("Bytes", ...), ("KB", ...), ..., ("PB", ...)]``.
    """
    num_bytes = float(num_bytes)
    if not math.isfinite(num_bytes) or num_bytes < 0:
        raise ValueError(
            f"num_bytes must be a finite non-negative number, got {num_bytes}"
        )
    return [
        (unit, num_bytes / (1024 ** power))
        for power, unit in enumerate(STORAGE_UNITS)
    ]


def estimate(inputs: CapacityInputs) -> CapacityResult:
    """Project request rates and yearly storage.

    Parameters
    ----------
    inputs : CapacityInputs

    Returns
    -------
    CapacityResult
    """
    dau = float(inputs.dau)
    read = float(inputs.ratio.read)
    write = float(inputs.ratio.write)
    total_ratio = float(inputs.ratio.total)

    reads_per_second = (dau * read / total_ratio) / SECONDS_PER_DAY
    writes_per_second = (dau * write / total_ratio) / SECONDS_PER_DAY
    storage = (
        float(inputs.payload_bytes)
        * writes_per_second
        * SECONDS_PER_DAY
        * DAYS_PER_YEAR
    )

    logger.debug(
        "Estimate dau=%d ratio=%s payload=%d: %.6f rps, %.6f wps, %.0f B/yr",
        inputs.dau, inputs.ratio, inputs.payload_bytes,
        reads_per_second, writes_per_second, storage,
    )
    return CapacityResult(
        reads_per_second=reads_per_second,
        writes_per_second=writes_per_second,
        storage_per_year_bytes=storage,
        storage_breakdown=tuple(format_storage(storage)),
    )
