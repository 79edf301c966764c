"""
ISO/IEC 7064 pure systems (MOD 11-2, 37-2, 97-10, 661-26, 1271-36).

A pure system uses one modulus M and one radix R. Two residue strategies are
provided and must agree for every payload:

- `RecursiveResidue`   the iterative form of the standard:
                         p = 0; for each value v: p = (p + v) * R mod M
- `PolynomialResidue`  the closed form: sum(v * R^(k-1)) mod M, where k is the
                         right position with the check slot at k = 1.

Unrolling the recursion shows the equivalence: the value at left position i of
an n-character payload is multiplied by R exactly n - i + 1 times, and
n - i + 1 = k - 1 for its right position k. A two-character check digit adds
one more multiplication by R in both forms.

Check value: `(M - p + 1) mod M`, the value that makes the whole code
congruent to 1 mod M. Validation folds the check value back in and tests
that congruence.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .alphabet import CharacterMap, IndexMap, decode, encode
from .base import CheckDigit, Descriptor
from .errors import InvalidCheckDigitValueError
from .weights import PowerWeights


class RecursiveResidue:
    """p = (p + v) * R mod M over the payload values."""

    def residue(self, values: Sequence[int], descriptor: Descriptor) -> int:
        m, r = descriptor.modulus, descriptor.radix
        p = 0
        for v in values:
            p = (p + v) * r % m
        # a double check digit needs one additional pass with value 0
        if descriptor.check_digit_length == 2:
            p = p * r % m
        return p


class PolynomialResidue:
    """sum(v * w(k)) mod M with `PowerWeights`."""

    def __init__(self, weights: PowerWeights) -> None:
        self.weights = weights

    def residue(self, values: Sequence[int], descriptor: Descriptor) -> int:
        n = len(values)
        total = 0
        for i, v in enumerate(values):
            total += v * self.weights.weight(i + 1, n - i + 1)
        if descriptor.check_digit_length == 2:
            total *= descriptor.radix
        return total % descriptor.modulus


class PureSystem(CheckDigit):
    """
    ISO/IEC 7064 pure system.

    Args:
        descriptor:      modulus, radix, check length and check alphabet.
        char_map:        payload character values; defaults to the index in
                         the check alphabet.
        residue:         `RecursiveResidue()` (default) or `PolynomialResidue`.
        min_check_value: smallest legal check value. Values below it are
                         lifted by M (MOD 97-10 as used for IBAN and LEI
                         forbids 00 and 01, which read like unchecked prefixes).
    """

    def __init__(
        self,
        descriptor: Descriptor,
        char_map: Optional[CharacterMap] = None,
        residue=None,
        min_check_value: int = 0,
    ) -> None:
        super().__init__(descriptor)
        self.char_map = char_map or IndexMap(descriptor.alphabet)
        self.strategy = residue or RecursiveResidue()
        self.min_check_value = min_check_value

    def residue(self, payload: str) -> int:
        values = self.char_map.values(payload, trailing=1)
        return self.strategy.residue(values, self.descriptor)

    def check_value(self, payload: str) -> int:
        m = self.modulus
        checksum = (m - self.residue(payload) + 1) % m
        if checksum < self.min_check_value:
            checksum += m
        return checksum

    def check_characters(self, payload: str) -> str:
        return encode(self.check_value(payload), self.alphabet, self.check_digit_length, self.radix)

    def verify(self, code: str) -> bool:
        payload, check = self.split(code)
        cd = decode(check, self.alphabet, self.radix, offset=len(payload))
        if not self.min_check_value <= cd < self.min_check_value + self.modulus:
            raise InvalidCheckDigitValueError(cd)
        return (cd + self.residue(payload)) % self.modulus == 1

    def weights(self, count: int) -> Tuple[int, ...]:
        """
        The first `count` polynomial weights, right position 1 first.

        Available for any pure system; the recursive form uses the same
        weights implicitly.
        """
        if isinstance(self.strategy, PolynomialResidue):
            return self.strategy.weights.sequence(count)
        return PowerWeights(self.radix, self.modulus).sequence(count)
