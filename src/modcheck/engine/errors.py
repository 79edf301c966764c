"""
Error taxonomy for check digit calculation.

Every rejection raised by the engine is a `CheckDigitError`. `calculate`
surfaces the specific subclass so callers can build user-facing messages;
`is_valid` catches the base class and answers `False`.

All messages start with "Invalid " except the missing-code one, so a caller
can tell "nothing given" apart from "something wrong given" by text alone.
"""

from __future__ import annotations

from typing import Optional

START_WITH_INVALID = "Invalid "
MISSING_CODE = "Code is missing"
ZERO_SUM = START_WITH_INVALID + "code, sum is zero"


def invalid_code(code: str, detail: Optional[str] = None) -> str:
    """Message text 'Invalid code "<code>", <detail>'."""
    return f'{START_WITH_INVALID}code "{code}"' + ("." if detail is None else f", {detail}")


class CheckDigitError(ValueError):
    """Base class for every check digit calculation/validation error."""


class MissingCodeError(CheckDigitError):
    """Input is None, empty or blank."""

    def __init__(self, message: str = MISSING_CODE) -> None:
        super().__init__(message)


class InvalidCharacterError(CheckDigitError):
    """
    A character is outside the algorithm's alphabet, or explicitly excluded
    at that position (e.g. the escape character of MOD 11-2 in the payload).

    Attributes:
        character: the offending character.
        position:  its 1-based position counted from the left.
    """

    def __init__(self, character: str, position: Optional[int] = None) -> None:
        self.character = character
        self.position = position
        if position is None:
            message = f"{START_WITH_INVALID}Character '{character}'"
        else:
            message = f"{START_WITH_INVALID}Character '{character}' at pos {position}"
        super().__init__(message)


class CodeTooShortError(CheckDigitError):
    """Input is shorter than the algorithm can process."""

    def __init__(self, code: str, minimum: int) -> None:
        self.code = code
        self.minimum = minimum
        super().__init__(invalid_code(code, f"too short (minimum length {minimum})"))


class CodeTooLongError(CheckDigitError):
    """Input is longer than any code the algorithm accepts."""

    def __init__(self, code: str, maximum: int) -> None:
        self.code = code
        self.maximum = maximum
        super().__init__(invalid_code(code, f"too long (maximum length {maximum})"))


class ZeroSumError(CheckDigitError):
    """Payload reduces to a degenerate all-zero value."""

    def __init__(self, message: str = ZERO_SUM) -> None:
        super().__init__(message)


class InvalidCheckDigitValueError(CheckDigitError):
    """A computed or supplied check value is outside the scheme's legal range."""

    def __init__(self, value: int, detail: Optional[str] = None) -> None:
        self.value = value
        message = f"{START_WITH_INVALID}Check Digit Value = {value}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
