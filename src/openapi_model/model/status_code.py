"""Response status code keys.

A key under ``responses`` is either an exact code (``200``, ``"404"``) or a
wildcard class written as one digit followed by ``XX`` (``"4XX"``, ``"5xx"``).
Both spellings of an exact code decode to the same value and every value
encodes back to a single canonical string.
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from pydantic_core import core_schema

MIN_CODE = 100
MAX_CODE = 999

_NUMERIC = re.compile(r"[+-]?[0-9]+")

EXPECTED_ANY = f"number between {MIN_CODE} and {MAX_CODE} (as string or integer) or a string that matches `\\dXX`"
EXPECTED_RANGE = f"number between {MIN_CODE} and {MAX_CODE}"
EXPECTED_LENGTH = "length 3"
EXPECTED_PATTERN = "format `\\dXX`"
EXPECTED_ASCII = "ascii, format `\\dXX`"


class StatusCodeError(ValueError):
    """Base class for status code decode failures."""

    def __init__(self, value: Any, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(f"invalid status code {value!r}, expected {expected}")


class OutOfRangeError(StatusCodeError):
    """Integer outside the accepted range."""


class WrongLengthError(StatusCodeError):
    """String that is not exactly three characters long."""


class InvalidFormatError(StatusCodeError):
    """Three-character string that is neither a number nor a ``\\dXX`` class."""


class WrongTypeError(StatusCodeError):
    """Input that is neither an integer nor a string."""


class StatusCodeKind(IntEnum):
    EXACT = 0
    WILDCARD = 1


@dataclass(frozen=True, order=True)
class StatusCode:
    """An exact status code or a wildcard status class.

    Ordering compares the kind first, so every exact code sorts before every
    wildcard class, then the numeric value. ``StatusCode.exact(200)`` and
    ``StatusCode.wildcard(2)`` are different keys.
    """

    kind: StatusCodeKind
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise WrongTypeError(self.value, "integer")
        # int subclasses such as HTTPStatus would otherwise leak into encode()
        object.__setattr__(self, "kind", StatusCodeKind(self.kind))
        object.__setattr__(self, "value", int(self.value))
        if self.kind is StatusCodeKind.EXACT:
            if not MIN_CODE <= self.value <= MAX_CODE:
                raise OutOfRangeError(self.value, EXPECTED_RANGE)
        elif not 0 <= self.value <= 9:
            raise OutOfRangeError(self.value, "single digit between 0 and 9")

    @classmethod
    def exact(cls, code: int) -> "StatusCode":
        return cls(StatusCodeKind.EXACT, code)

    @classmethod
    def wildcard(cls, digit: int) -> "StatusCode":
        return cls(StatusCodeKind.WILDCARD, digit)

    @property
    def is_exact(self) -> bool:
        return self.kind is StatusCodeKind.EXACT

    @property
    def is_wildcard(self) -> bool:
        return self.kind is StatusCodeKind.WILDCARD

    @classmethod
    def decode(cls, raw: Any) -> "StatusCode":
        """Decode a document node into a status code.

        Accepts an integer in range, a three-character numeric string, or a
        three-character ``\\dXX`` class (case-insensitive). Raises a
        ``StatusCodeError`` subclass for anything else.
        """
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise WrongTypeError(raw, EXPECTED_ANY)

        if isinstance(raw, int):
            return cls._from_int(raw)

        if len(raw) != 3:
            raise WrongLengthError(raw, EXPECTED_LENGTH)

        if _NUMERIC.fullmatch(raw):
            return cls._from_int(int(raw), raw)

        if not raw.isascii():
            raise InvalidFormatError(raw, EXPECTED_ASCII)

        upper = raw.upper()
        if upper[0] in "0123456789" and upper[1:] == "XX":
            return cls.wildcard(int(upper[0]))
        raise InvalidFormatError(raw, EXPECTED_PATTERN)

    @classmethod
    def _from_int(cls, number: int, raw: Any = None) -> "StatusCode":
        if not MIN_CODE <= number <= MAX_CODE:
            raise OutOfRangeError(number if raw is None else raw, EXPECTED_RANGE)
        return cls.exact(number)

    def encode(self) -> str:
        """Return the canonical string form (``"200"`` or ``"4XX"``)."""
        if self.kind is StatusCodeKind.EXACT:
            return str(self.value)
        return f"{self.value}XX"

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        if self.kind is StatusCodeKind.EXACT:
            return f"StatusCode.exact({self.value})"
        return f"StatusCode.wildcard({self.value})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                StatusCode.encode, when_used="always"
            ),
        )


def _validate(value: Any) -> StatusCode:
    if isinstance(value, StatusCode):
        return value
    return StatusCode.decode(value)
