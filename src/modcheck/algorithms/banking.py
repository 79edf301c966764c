"""
Banking references built on MOD 97-10.

What this does
--------------
- `MOD97_ALPHANUMERIC`: MOD 97-10 over alphanumeric payloads, letters read as
  two decimal digits (A = 10 .. Z = 35). Check digits are 02..98; this is the
  check used by LEI and the German Leitweg-ID.
- `IBAN` (ISO 13616): check digits sit at characters 3-4. The first four
  characters are rotated to the end before the MOD 97-10 check.
- `RF_CREDITOR_REFERENCE` (ISO 11649): same layout and check as an IBAN,
  case-insensitive.
"""

from __future__ import annotations

from string import ascii_lowercase, ascii_uppercase
from typing import Callable, TypeVar

from ..engine.alphabet import NUMERIC, DecimalExpansionMap
from ..engine.base import CheckDigit, Descriptor
from ..engine.errors import CodeTooShortError, InvalidCharacterError
from ..engine.pure import PureSystem

T = TypeVar("T")

MOD97_ALPHANUMERIC = PureSystem(
    Descriptor("mod97-10-alphanumeric", 97, 10, 2, NUMERIC),
    DecimalExpansionMap(),
    min_check_value=2,
)

# Country/prefix (2) + check digits (2) + at least one account character.
IBAN_MIN_LENGTH = 5


class Iban(CheckDigit):
    """
    IBAN check digits as a rotation over an alphanumeric MOD 97-10 system.

    `calculate` takes a complete IBAN whose characters 3-4 are placeholders
    (conventionally "00") and returns the two check digits for them.
    Invalid characters are reported at their position in the IBAN as given.
    """

    def __init__(self, descriptor: Descriptor, base: PureSystem) -> None:
        super().__init__(descriptor)
        self.base = base

    def _require_length(self, code: str) -> None:
        if len(code) < IBAN_MIN_LENGTH:
            raise CodeTooShortError(code, IBAN_MIN_LENGTH)

    def _rotated(self, check: Callable[[str], T], code: str, head: int) -> T:
        """Run `check` on `code` with its first four characters moved to the end (keeping `head` of them)."""
        self._require_length(code)
        try:
            return check(code[4:] + code[:head])
        except InvalidCharacterError as exc:
            if exc.position is None:
                raise
            # positions past the account part belong to the moved prefix
            tail = len(code) - 4
            position = exc.position + 4 if exc.position <= tail else exc.position - tail
            raise InvalidCharacterError(exc.character, position) from None

    def check_characters(self, payload: str) -> str:
        return self._rotated(self.base.check_characters, payload, 2)

    def verify(self, code: str) -> bool:
        return self._rotated(self.base.verify, code, 4)

    def with_check_digit(self, payload: str) -> str:
        return payload[:2] + self.calculate(payload) + payload[4:]


# folds a-z only; "ß".upper() is "SS"
ASCII_UPPER = str.maketrans(ascii_lowercase, ascii_uppercase)


class CaseInsensitive(CheckDigit):
    """Delegates to another algorithm after upper-casing ASCII letters."""

    def __init__(self, descriptor: Descriptor, delegate: CheckDigit) -> None:
        super().__init__(descriptor)
        self.delegate = delegate

    def check_characters(self, payload: str) -> str:
        return self.delegate.check_characters(payload.translate(ASCII_UPPER))

    def verify(self, code: str) -> bool:
        return self.delegate.verify(code.translate(ASCII_UPPER))

    def with_check_digit(self, payload: str) -> str:
        self.calculate(payload)
        return self.delegate.with_check_digit(payload.translate(ASCII_UPPER))


IBAN = Iban(Descriptor("iban", 97, 10, 2, NUMERIC), MOD97_ALPHANUMERIC)
RF_CREDITOR_REFERENCE = CaseInsensitive(Descriptor("rf-creditor-reference", 97, 10, 2, NUMERIC), IBAN)

BANKING_ALGORITHMS = (MOD97_ALPHANUMERIC, IBAN, RF_CREDITOR_REFERENCE)
