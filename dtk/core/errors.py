# -*- coding: utf-8 -*-
"""
Errors - Validation error taxonomy for the DTK computation layer.

Every fallible operation in ``dtk.core`` reports bad user input by raising
a subclass of ``ValidationError``. Each error carries a ``kind`` enum
member so callers can branch on the failure without parsing messages.
Programming errors (bad arguments from code, not from users) raise plain
``ValueError`` instead.

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
from enum import Enum
from typing import Optional


class DecodeErrorKind(Enum):
    """Reasons a Base64 or URL decode can fail."""

    INVALID_CHARACTER = "invalid_character"
    INVALID_PADDING = "invalid_padding"
    INVALID_UTF8 = "invalid_utf8"


class CoordinateErrorKind(Enum):
    """Reasons a latitude/longitude pair is rejected."""

    LATITUDE_OUT_OF_RANGE = "latitude_out_of_range"
    LONGITUDE_OUT_OF_RANGE = "longitude_out_of_range"


class RatioErrorKind(Enum):
    """Reasons a ``R:W`` ratio string is rejected."""

    MALFORMED_FORMAT = "malformed_format"
    ZERO_COMPONENT = "zero_component"


class NumericErrorKind(Enum):
    """Reasons a numeric text field is rejected."""

    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


class JsonErrorKind(Enum):
    """Reasons a JSON document is rejected."""

    INVALID_JSON = "invalid_json"


class ValidationError(ValueError):
    """Base class for all user-input validation failures.

    Parameters
    ----------
    kind : Enum
        Discriminator identifying the specific failure.
    message : str
        Human-readable description, suitable for display.
    """

    def __init__(self, kind: Enum, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.message!r})"


class DecodeError(ValidationError):
    """Input could not be decoded.

    Parameters
    ----------
    kind : DecodeErrorKind
    message : str
    position : Optional[int]
        0-based index of the offending character, when known.
    """

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        position: Optional[int] = None,
    ) -> None:
        super().__init__(kind, message)
        self.position = position


class CoordinateError(ValidationError):
    """A coordinate component lies outside its valid range.

    Parameters
    ----------
    kind : CoordinateErrorKind
    message : str
    value : float
        The rejected component value.
    """

    def __init__(
        self,
        kind: CoordinateErrorKind,
        message: str,
        value: float,
    ) -> None:
        super().__init__(kind, message)
        self.value = value


class RatioParseError(ValidationError):
    """A read:write ratio string is malformed or has a zero side."""

    def __init__(self, kind: RatioErrorKind, message: str) -> None:
        super().__init__(kind, message)


class NumericParseError(ValidationError):
    """A numeric input field does not hold an acceptable number.

    Parameters
    ----------
    field : str
        Display name of the field (e.g. ``"Daily Active User"``).
    value : str
        Raw text that failed to parse.
    kind : NumericErrorKind
        ``NOT_A_NUMBER`` for unparseable text, ``OUT_OF_RANGE`` for a
        number too large to compute with.
    """

    def __init__(
        self,
        field: str,
        value: str,
        kind: NumericErrorKind = NumericErrorKind.NOT_A_NUMBER,
    ) -> None:
        if kind is NumericErrorKind.OUT_OF_RANGE:
            shown = value if len(value) <= 20 else f"{value[:17]}..."
            message = f"{field} is too large: {shown}"
        else:
            message = f"Invalid {field}: {value!r}"
        super().__init__(kind, message)
        self.field = field
        self.value = value


class JsonFormatError(ValidationError):
    """Input text is not a valid JSON document.

    Parameters
    ----------
    message : str
    line : int
        1-based line of the parse failure.
    column : int
        1-based column of the parse failure.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(JsonErrorKind.INVALID_JSON, message)
        self.line = line
        self.column = column
