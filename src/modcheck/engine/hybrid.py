"""
ISO/IEC 7064 hybrid systems (MOD 11,10 / 27,26 / 37,36).

Two moduli are used: M (the first number of the designation) and M - 1, the
size of the character set. The result is a single check character from that
character set.

    product = M - 1
    for each value v:
        sum = (v + product) mod (M - 1), with 0 read as M - 1
        product = 2 * sum mod M
    check = M - product, with M - 1 read as 0
"""

from __future__ import annotations

from typing import Optional

from .alphabet import CharacterMap, IndexMap, decode
from .base import CheckDigit, Descriptor


def hybrid_descriptor(name: str, alphabet: str) -> Descriptor:
    """Descriptor of the hybrid system over `alphabet` (M = len + 1)."""
    return Descriptor(name, len(alphabet) + 1, len(alphabet), 1, alphabet)


class HybridSystem(CheckDigit):
    """ISO/IEC 7064 hybrid system; `descriptor.radix` is the second modulus M - 1."""

    def __init__(self, descriptor: Descriptor, char_map: Optional[CharacterMap] = None) -> None:
        if descriptor.radix != descriptor.modulus - 1 or len(descriptor.alphabet) != descriptor.radix:
            raise ValueError(f"{descriptor.name}: hybrid system needs radix M-1 and an alphabet of M-1 characters")
        super().__init__(descriptor)
        self.char_map = char_map or IndexMap(descriptor.alphabet)

    def check_value(self, payload: str) -> int:
        m = self.modulus
        other = self.radix
        product = other
        for v in self.char_map.values(payload, trailing=1):
            s = (v + product) % other
            product = 2 * (s or other) % m
        raw = m - product
        return 0 if raw == other else raw

    def check_characters(self, payload: str) -> str:
        return self.alphabet[self.check_value(payload)]

    def verify(self, code: str) -> bool:
        payload, check = self.split(code)
        return self.check_value(payload) == decode(check, self.alphabet, offset=len(payload))
