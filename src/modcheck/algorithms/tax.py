"""
National tax, VAT and personal identity numbers.

What this does
--------------
- TID_DK  Danish CPR/CVR. Weights 2..7 cyclic from the right, last digit
          weight 1. No visible check digit: the whole number must leave
          remainder 0 mod 11, so `calculate` returns "0" or fails.
- TID_RO  Romanian CNP/CIF. Weights 2,7,9,1,4,6,3,5,8,2,7,9 from the left,
          remainder 10 is written as "0".
- HETU_FI Finnish personal identity code. Numeric value mod 31, check
          character from a 31-character alphabet.
- VAT_BE  Belgian VAT. Numeric value mod 97, check = 97 - r (01..97).
- VAT_FI  Finnish VAT. Weights are powers of 2 mod 11, check = 11 - r; a
          result of 10 makes the number impossible.
- VAT_GB  UK VAT. Weights 8..2 mod 97; valid under the legacy MOD 97 rule or
          the MOD 9755 rule (remainder offset by 55). Twelve-digit numbers
          carry three branch digits outside the check.
- VAT_LU  Luxembourg VAT. Numeric value mod 89, two check digits.

Office-code prefixes, lengths and the "BE0"/"GB" shapes are validated by
whatever format layer calls these; the algorithms only see digits.
"""

from __future__ import annotations

from ..engine.alphabet import ALPHANUMERIC31, NUMERIC, IndexMap
from ..engine.base import Descriptor
from ..engine.weighted import (
    CheckEncoder,
    MultiTargetRemainder,
    WeightedModulus,
    ZeroRemainder,
    complement,
    distance,
    identity,
)
from ..engine.weights import CyclicWeights, FunctionWeights, PowerWeights

DIGITS = IndexMap(NUMERIC)

TID_DK = WeightedModulus(
    Descriptor("tid-dk", 11, 10, 1, NUMERIC),
    DIGITS,
    CyclicWeights((2, 3, 4, 5, 6, 7), anchor="right", offset=2, default=1),
    derive=identity,
    encoder=CheckEncoder(NUMERIC, allowed={0}),
    acceptance=ZeroRemainder(),
)

TID_RO = WeightedModulus(
    Descriptor("tid-ro", 11, 10, 1, NUMERIC),
    DIGITS,
    CyclicWeights((2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9), anchor="left"),
    derive=identity,
    encoder=CheckEncoder(NUMERIC, replacements={10: "0"}),
)

# shift=2: the weighted sum is the payload's decimal value.
HETU_FI = WeightedModulus(
    Descriptor("hetu-fi", 31, 10, 1, ALPHANUMERIC31),
    DIGITS,
    PowerWeights(10, 31, shift=2),
    derive=identity,
)

VAT_BE = WeightedModulus(
    Descriptor("vat-be", 97, 10, 2, NUMERIC),
    DIGITS,
    PowerWeights(10, 97, shift=2),
    derive=distance,
)

VAT_FI = WeightedModulus(
    Descriptor("vat-fi", 11, 2, 1, NUMERIC),
    DIGITS,
    PowerWeights(2, 11, table=(1, 2, 4, 8, 5, 10, 9, 7, 3, 6)),
    derive=complement,
)

VAT_GB = WeightedModulus(
    Descriptor("vat-gb", 97, 10, 2, NUMERIC),
    DIGITS,
    FunctionWeights(lambda left_pos, right_pos: right_pos),
    derive=complement,
    acceptance=MultiTargetRemainder(offsets=(0, 55), base_length=9, extra_length=3),
)

VAT_LU = WeightedModulus(
    Descriptor("vat-lu", 89, 10, 2, NUMERIC),
    DIGITS,
    PowerWeights(10, 89, shift=2),
    derive=identity,
)

TAX_ALGORITHMS = (TID_DK, TID_RO, HETU_FI, VAT_BE, VAT_FI, VAT_GB, VAT_LU)
