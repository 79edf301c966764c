"""
Weighting strategies: the multiplier a character gets for its position.

Positions follow `alphabet.positions`: when a payload is summed for
`calculate`, right position 1 is the check slot.
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    `base ** exponent % modulus` by iterative square-and-multiply.

    Every intermediate product is reduced, so the numbers never grow beyond
    `modulus ** 2`. Floating point `pow` is no substitute: 10**23 % 97 is 56,
    which a double cannot reproduce.
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


class Weighting:
    """Strategy: weight for a (left_pos, right_pos) pair."""

    def weight(self, left_pos: int, right_pos: int) -> int:
        raise NotImplementedError

    def weighted_value(self, value: int, left_pos: int, right_pos: int) -> int:
        return value * self.weight(left_pos, right_pos)


class PowerWeights(Weighting):
    """
    ISO/IEC 7064 polynomial weights: `w(k) = R^(k-1) mod M` for right position k.

    `table` holds the first weights (index 0 is right position 1) for speed
    and as documentation of the sequence; positions beyond it are computed
    with `mod_pow`.

    `shift=2` gives `R^(k-2)`: the last payload character gets weight 1 and
    the weighted sum is the payload's plain base-R value mod M.
    """

    def __init__(self, radix: int, modulus: int, table: Sequence[int] = (), shift: int = 1) -> None:
        self.radix = radix
        self.modulus = modulus
        self.table: Tuple[int, ...] = tuple(table)
        self.shift = shift

    def weight(self, left_pos: int, right_pos: int) -> int:
        exponent = right_pos - self.shift
        if exponent < len(self.table):
            return self.table[exponent]
        return mod_pow(self.radix, exponent, self.modulus)

    def sequence(self, count: int) -> Tuple[int, ...]:
        """The first `count` weights, right position 1 first."""
        return tuple(self.weight(0, k) for k in range(1, count + 1))


class CyclicWeights(Weighting):
    """
    A fixed weight table repeated along the code.

    anchor:  "left" counts from the first character, "right" from the check slot.
    offset:  positions skipped before the table starts; those positions get
             `default`.
    """

    def __init__(self, table: Sequence[int], anchor: str = "left", offset: int = 0, default: int = 0) -> None:
        if anchor not in ("left", "right"):
            raise ValueError(f"anchor must be 'left' or 'right', got {anchor!r}")
        self.table: Tuple[int, ...] = tuple(table)
        self.anchor = anchor
        self.offset = offset
        self.default = default

    def weight(self, left_pos: int, right_pos: int) -> int:
        pos = left_pos if self.anchor == "left" else right_pos
        index = pos - 1 - self.offset
        if index < 0:
            return self.default
        return self.table[index % len(self.table)]


class FunctionWeights(Weighting):
    """Weight given by an arbitrary function of (left_pos, right_pos)."""

    def __init__(self, func: Callable[[int, int], int]) -> None:
        self.func = func

    def weight(self, left_pos: int, right_pos: int) -> int:
        return self.func(left_pos, right_pos)


class LuhnWeights(Weighting):
    """
    Luhn ("mod 10") doubling: every second digit counting from the check slot
    is doubled, and a two-digit product counts as the sum of its digits.
    """

    def weight(self, left_pos: int, right_pos: int) -> int:
        return 2 if right_pos % 2 == 0 else 1

    def weighted_value(self, value: int, left_pos: int, right_pos: int) -> int:
        product = value * self.weight(left_pos, right_pos)
        return product - 9 if product > 9 else product
