"""
Weighted-sum modulus engine for the national and sector-specific schemes.

remainder = sum(weighted_value(value(c), left_pos, right_pos)) mod M

The summed span is the payload with the check slot at right position 1. The
remainder becomes a check value through a `derive` function and a check
string through a `CheckEncoder`. An `Acceptance` strategy decides what a
valid code is:

- `TrailingCheckDigit`     recompute from the payload, compare the trailing
                           characters (default).
- `ZeroRemainder`          the code embeds no visible check digit; the whole
                           code must leave remainder 0.
- `MultiTargetRemainder`   remainder plus check value must hit one of several
                           targets (legacy and current scheme side by side).
"""

from __future__ import annotations

import logging
from typing import Callable, Container, Mapping, Optional, Sequence

from .alphabet import NUMERIC, CharacterMap, decode, encode, positions
from .base import CheckDigit, Descriptor
from .errors import CodeTooLongError, InvalidCheckDigitValueError, ZeroSumError
from .weights import Weighting

logger = logging.getLogger(__name__)


# ---- Remainder -> check value ---------------------------------------------------------

def identity(remainder: int, modulus: int) -> int:
    return remainder


def complement(remainder: int, modulus: int) -> int:
    """(M - r) mod M: the value that brings the sum to a multiple of M."""
    return (modulus - remainder) % modulus


def distance(remainder: int, modulus: int) -> int:
    """M - r without reduction, so a zero remainder gives M."""
    return modulus - remainder


# ---- Check value -> characters --------------------------------------------------------

class CheckEncoder:
    """
    Encode a check value as characters.

    Args:
        alphabet:     check characters (value = index).
        length:       1 or 2 characters; two characters form a base-`radix` number.
        replacements: values with a fixed rendering, e.g. {10: "X"}.
        allowed:      if given, only these values may be encoded.
    """

    def __init__(
        self,
        alphabet: str = NUMERIC,
        length: int = 1,
        replacements: Optional[Mapping[int, str]] = None,
        allowed: Optional[Container[int]] = None,
    ) -> None:
        self.alphabet = alphabet
        self.length = length
        self.radix = len(alphabet)
        self.replacements = dict(replacements or {})
        self.allowed = allowed

    def __call__(self, value: int) -> str:
        if value in self.replacements:
            return self.replacements[value]
        if self.allowed is not None and value not in self.allowed:
            raise InvalidCheckDigitValueError(value, "not allowed")
        if not 0 <= value < self.radix ** self.length:
            raise InvalidCheckDigitValueError(value)
        return encode(value, self.alphabet, self.length, self.radix)


# ---- Acceptance strategies ------------------------------------------------------------

class Acceptance:
    """Strategy: which complete codes are valid, and how a payload is completed."""

    def admit(self, algorithm: "WeightedModulus", payload: str) -> None:
        """Raise if `calculate` must refuse `payload` outright."""

    def accepts(self, algorithm: "WeightedModulus", code: str) -> bool:
        raise NotImplementedError

    def complete(self, algorithm: "WeightedModulus", payload: str) -> str:
        return payload + algorithm.calculate(payload)


class TrailingCheckDigit(Acceptance):
    """Valid if the trailing characters equal the ones computed from the payload."""

    def accepts(self, algorithm: "WeightedModulus", code: str) -> bool:
        payload, check = algorithm.split(code)
        return algorithm.check_characters(payload) == check


class ZeroRemainder(Acceptance):
    """
    Valid if the whole code leaves remainder 0.

    Such codes carry no separate check digit, so `complete` returns the payload
    unchanged once `calculate` has confirmed it.
    """

    def accepts(self, algorithm: "WeightedModulus", code: str) -> bool:
        return algorithm.remainder(code) == 0

    def complete(self, algorithm: "WeightedModulus", payload: str) -> str:
        algorithm.calculate(payload)
        return payload


class MultiTargetRemainder(Acceptance):
    """
    Valid if `(remainder + check + offset) mod M == 0` for any of `offsets`.

    `base_length`/`extra_length` describe codes that may carry extra trailing
    characters outside the check (branch identifiers): a code of
    `base_length + extra_length` characters is checked on its first
    `base_length` characters; any other length above `base_length` is invalid.
    """

    def __init__(self, offsets: Sequence[int], base_length: Optional[int] = None, extra_length: int = 0) -> None:
        self.offsets = tuple(offsets)
        self.base_length = base_length
        self.extra_length = extra_length

    def admit(self, algorithm: "WeightedModulus", payload: str) -> None:
        if self.base_length is None:
            return
        maximum = self.base_length - algorithm.check_digit_length
        if len(payload) > maximum:
            raise CodeTooLongError(payload, maximum)

    def accepts(self, algorithm: "WeightedModulus", code: str) -> bool:
        if self.base_length is not None and len(code) > self.base_length:
            if len(code) != self.base_length + self.extra_length:
                return False
            code = code[: self.base_length]
        payload, check = algorithm.split(code)
        cd = decode(check, NUMERIC, offset=len(payload))
        if cd >= algorithm.modulus:
            raise InvalidCheckDigitValueError(cd, f"must be < {algorithm.modulus}")
        remainder = algorithm.remainder(payload)
        for offset in self.offsets:
            if (remainder + cd + offset) % algorithm.modulus == 0:
                logger.debug("%s accepted %r with offset %d", algorithm.name, code, offset)
                return True
        return False


# ---- Engine ---------------------------------------------------------------------------

class WeightedModulus(CheckDigit):
    """
    Weighted positional sum reduced by `descriptor.modulus`.

    Args:
        descriptor:      name, modulus, check length, check alphabet.
        char_map:        payload character values.
        weighting:       position weights.
        derive:          remainder -> check value (`identity`, `complement`, `distance`).
        encoder:         check value -> characters; defaults to the descriptor's
                         alphabet and check length.
        reject_zero_sum: raise `ZeroSumError` when the weighted sum is 0.
        acceptance:      validity rule; defaults to `TrailingCheckDigit()`.
    """

    def __init__(
        self,
        descriptor: Descriptor,
        char_map: CharacterMap,
        weighting: Weighting,
        derive: Callable[[int, int], int] = identity,
        encoder: Optional[CheckEncoder] = None,
        reject_zero_sum: bool = True,
        acceptance: Optional[Acceptance] = None,
    ) -> None:
        super().__init__(descriptor)
        self.char_map = char_map
        self.weighting = weighting
        self.derive = derive
        self.encoder = encoder or CheckEncoder(descriptor.alphabet, descriptor.check_digit_length)
        self.reject_zero_sum = reject_zero_sum
        self.acceptance = acceptance or TrailingCheckDigit()

    def remainder(self, span: str) -> int:
        total = 0
        for ch, lp, rp in positions(span, trailing=1):
            total += self.weighting.weighted_value(self.char_map.value_of(ch, lp, rp), lp, rp)
        if total == 0 and self.reject_zero_sum:
            raise ZeroSumError()
        return total % self.modulus

    def check_value(self, payload: str) -> int:
        return self.derive(self.remainder(payload), self.modulus)

    def check_characters(self, payload: str) -> str:
        self.acceptance.admit(self, payload)
        return self.encoder(self.check_value(payload))

    def verify(self, code: str) -> bool:
        return self.acceptance.accepts(self, code)

    def with_check_digit(self, payload: str) -> str:
        return self.acceptance.complete(self, payload)
