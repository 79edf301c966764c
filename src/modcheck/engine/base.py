"""
Shared contract of every check digit algorithm.

An algorithm is an immutable object built once at import time. It offers:

- `calculate(payload)`        -> check character(s); raises `CheckDigitError`.
- `is_valid(code)`            -> bool; never raises for bad input.
- `verify(code)`              -> bool; like `is_valid` but lets the specific
                                 `CheckDigitError` through (for messages).
- `with_check_digit(payload)` -> the complete code.

Subclasses implement `check_characters` (the raw computation, no blank check)
and, where validation is not "recompute and compare the trailing
characters", `verify`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import CheckDigitError, CodeTooShortError, MissingCodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Descriptor:
    """
    Static description of an algorithm.

    Attributes:
        name:               registry name, e.g. "iso7064-mod11-2".
        modulus:            M, the number sums/products are reduced by.
        radix:              R, the multiplicative step of a pure system, or the
                            second modulus (M - 1) of a hybrid system.
        check_digit_length: 1 or 2 trailing check characters.
        alphabet:           characters the check value is encoded with.
    """
    name: str
    modulus: int
    radix: int
    check_digit_length: int
    alphabet: str

    def __post_init__(self) -> None:
        if self.modulus < 2:
            raise ValueError(f"{self.name}: modulus must be >= 2, got {self.modulus}")
        if self.check_digit_length not in (1, 2):
            raise ValueError(f"{self.name}: check digit length must be 1 or 2, got {self.check_digit_length}")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError(f"{self.name}: alphabet contains duplicate characters")


def is_blank(code: Optional[str]) -> bool:
    return code is None or not code.strip()


class CheckDigit:
    """Base class; see module docstring for the contract."""

    def __init__(self, descriptor: Descriptor) -> None:
        self.descriptor = descriptor

    # -- Metadata ---------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def modulus(self) -> int:
        return self.descriptor.modulus

    @property
    def radix(self) -> int:
        return self.descriptor.radix

    @property
    def check_digit_length(self) -> int:
        return self.descriptor.check_digit_length

    @property
    def alphabet(self) -> str:
        return self.descriptor.alphabet

    # -- Public API -------------------------------------------------------------------------

    def calculate(self, payload: Optional[str]) -> str:
        """Check character(s) for `payload`."""
        if is_blank(payload):
            raise MissingCodeError()
        return self.check_characters(payload)

    def is_valid(self, code: Optional[str]) -> bool:
        """True if `code` carries a correct check digit. Never raises on bad input."""
        if is_blank(code):
            return False
        try:
            return self.verify(code)
        except CheckDigitError as exc:
            logger.debug("%s rejected %r: %s", self.name, code, exc)
            return False

    def verify(self, code: str) -> bool:
        payload, check = self.split(code)
        return self.check_characters(payload) == check

    def with_check_digit(self, payload: str) -> str:
        """The complete code for `payload`."""
        return payload + self.calculate(payload)

    # -- Helpers for subclasses -------------------------------------------------------------

    def check_characters(self, payload: str) -> str:
        raise NotImplementedError

    def split(self, code: str) -> Tuple[str, str]:
        """Split `code` into (payload, check characters)."""
        n = self.check_digit_length
        if len(code) < n:
            raise CodeTooShortError(code, n)
        return code[:-n], code[-n:]

    def __repr__(self) -> str:
        d = self.descriptor
        return f"{type(self).__name__}({d.name!r}, modulus={d.modulus}, radix={d.radix})"
