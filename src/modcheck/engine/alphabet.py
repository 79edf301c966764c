"""
Alphabet & position model.

What this does
--------------
- Declares the character sets used by the ISO/IEC 7064 systems and their
  national relatives.
- Turns characters into numeric values (`CharacterMap.value_of`) and check
  values back into characters (`encode` / `decode`).
- Numbers positions: every character of a summed span has a 1-based
  `left_pos` and a 1-based `right_pos` (`right_pos = length - left_pos + 1`).

A character that is not part of the declared alphabet is always an error
(`InvalidCharacterError` carrying the character and its left position); it is
never skipped.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import InvalidCharacterError

# ---- Character sets -------------------------------------------------------------------

NUMERIC = "0123456789"
ALPHABETIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHANUMERIC = NUMERIC + ALPHABETIC

# MOD 11-2 check characters: "0".."9" plus "X" for the value 10.
NUMERIC_PLUS_X = NUMERIC + "X"

# MOD 37-2 check characters: alphanumeric plus "*" for the value 36.
ALPHANUMERIC_PLUS_STAR = ALPHANUMERIC + "*"

# Finnish personal identity code: digits plus 21 letters (no G, I, O, Q, Z).
ALPHANUMERIC31 = NUMERIC + "ABCDEFHJKLMNPRSTUVWXY"


# ---- Positions ------------------------------------------------------------------------

def positions(span: str, trailing: int = 0) -> Iterator[Tuple[str, int, int]]:
    """
    Yield `(character, left_pos, right_pos)` for every character of `span`.

    `trailing` reserves that many right positions after the span. When a
    payload is summed for `calculate`, the check slot sits at right position 1,
    so callers pass `trailing=1` and the last payload character gets
    `right_pos == 2`.
    """
    length = len(span) + trailing
    for i, ch in enumerate(span):
        yield ch, i + 1, length - i


# ---- Character maps -------------------------------------------------------------------

class CharacterMap:
    """
    Strategy: convert a character at a position into a numeric value.

    Subclasses implement `value_of`; `values` maps a whole span.
    """

    def value_of(self, character: str, left_pos: int, right_pos: int) -> int:
        raise NotImplementedError

    def values(self, span: str, trailing: int = 0) -> List[int]:
        return [self.value_of(ch, lp, rp) for ch, lp, rp in positions(span, trailing)]

    def accepts(self, character: str) -> bool:
        """True if `character` can appear anywhere in a payload."""
        try:
            self.value_of(character, 1, 1)
        except InvalidCharacterError:
            return False
        return True


class IndexMap(CharacterMap):
    """
    Value is the character's index in `alphabet`.

    `excluded` lists characters that are legal check characters but must not
    appear in the payload (the MOD 11-2 "X", the MOD 37-2 "*").
    """

    def __init__(self, alphabet: str, excluded: str = "") -> None:
        self.alphabet = alphabet
        self.excluded = excluded
        self._index: Dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}

    def value_of(self, character: str, left_pos: int, right_pos: int) -> int:
        if character in self.excluded:
            raise InvalidCharacterError(character, left_pos)
        try:
            return self._index[character]
        except KeyError:
            raise InvalidCharacterError(character, left_pos) from None

    def __repr__(self) -> str:
        return f"IndexMap({self.alphabet!r}, excluded={self.excluded!r})"


class Base36Map(CharacterMap):
    """
    Digits keep their value, upper-case letters count on from 10 (A=10 .. Z=35).

    `extra` adds symbols with a fixed value, e.g. the machine-readable-zone
    filler "<" which counts as 0.
    """

    def __init__(self, extra: Optional[Mapping[str, int]] = None) -> None:
        self.extra: Dict[str, int] = dict(extra or {})

    def value_of(self, character: str, left_pos: int, right_pos: int) -> int:
        if character in self.extra:
            return self.extra[character]
        pos = ALPHANUMERIC.find(character) if len(character) == 1 else -1
        if pos == -1:
            raise InvalidCharacterError(character, left_pos)
        return pos


class DecimalExpansionMap(Base36Map):
    """
    Base-36 values where a letter stands for its two decimal digits.

    This is the IBAN/LEI convention: "A" is read as "10", so the payload
    "AB1" is processed as the digit string "10111".
    """

    def values(self, span: str, trailing: int = 0) -> List[int]:
        digits: List[int] = []
        for ch, lp, rp in positions(span, trailing):
            value = self.value_of(ch, lp, rp)
            if value >= len(NUMERIC):
                digits.extend(divmod(value, len(NUMERIC)))
            else:
                digits.append(value)
        return digits


class TransliterationMap(CharacterMap):
    """
    Digits keep their value, letters are transliterated through a table.

    Several letters may share a value (vehicle identification numbers reuse
    1..9). `folds` maps locale variants onto table letters before lookup,
    e.g. German umlauts onto their base vowel.
    """

    def __init__(self, letters: Mapping[str, int], folds: Optional[Mapping[str, str]] = None) -> None:
        self.letters: Dict[str, int] = dict(letters)
        self.folds: Dict[str, str] = dict(folds or {})

    def value_of(self, character: str, left_pos: int, right_pos: int) -> int:
        pos = NUMERIC.find(character) if len(character) == 1 else -1
        if pos != -1:
            return pos
        value = self.letters.get(self.folds.get(character, character))
        if value is None:
            raise InvalidCharacterError(character, left_pos)
        return value


# ---- Check character encoding ---------------------------------------------------------

def encode(value: int, alphabet: str, length: int = 1, radix: int = 10) -> str:
    """
    Encode a check value as `length` characters of `alphabet`.

    Two-character check digits are a base-`radix` number:
    `second = value % radix`, `first = (value - second) / radix`.
    """
    if length == 2:
        first, second = divmod(value, radix)
        return alphabet[first] + alphabet[second]
    return alphabet[value]


def decode(chars: str, alphabet: str, radix: int = 10, offset: int = 0) -> int:
    """
    Inverse of `encode`. `offset` is the number of characters preceding
    `chars` in the code, used to report the left position of a bad character.
    """
    value = 0
    for i, ch in enumerate(chars):
        pos = alphabet.find(ch) if len(ch) == 1 else -1
        if pos == -1:
            raise InvalidCharacterError(ch, offset + i + 1)
        value = value * radix + pos
    return value
