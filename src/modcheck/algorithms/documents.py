"""
Card, travel document, vessel and vehicle numbers.

All four are weighted sums; they differ in character values and weights:

    LUHN         digits; every second digit from the check slot doubled (digit sum)
    MRTD_731     A = 10 .. Z = 35, filler "<" = 0; weights 7, 3, 1 from the left
    VESSEL_IMO   digits; weights 2 .. 7 from the right (six-digit IMO numbers)
    VEHICLE_FIN  letters transliterated to 1..9; weights 3 .. 10, 1, 2 from the right
"""

from __future__ import annotations

from ..engine.alphabet import NUMERIC, NUMERIC_PLUS_X, Base36Map, IndexMap, TransliterationMap
from ..engine.base import Descriptor
from ..engine.weighted import WeightedModulus, complement, identity
from ..engine.weights import CyclicWeights, LuhnWeights

LUHN = WeightedModulus(
    Descriptor("luhn", 10, 10, 1, NUMERIC),
    IndexMap(NUMERIC),
    LuhnWeights(),
    derive=complement,
)

# ICAO Doc 9303 machine-readable zone.
MRTD_731 = WeightedModulus(
    Descriptor("mrtd", 10, 10, 1, NUMERIC),
    Base36Map(extra={"<": 0}),
    CyclicWeights((7, 3, 1), anchor="left"),
    derive=identity,
)

# Index is right position - 1; the check slot itself has weight 0.
VESSEL_IMO = WeightedModulus(
    Descriptor("vessel-imo", 10, 10, 1, NUMERIC),
    IndexMap(NUMERIC),
    CyclicWeights((0, 2, 3, 4, 5, 6, 7, 8, 0, 0), anchor="right"),
    derive=identity,
)

# ---- Vehicle identification (KBA FIN, German driving licence number) ------------------

FIN_LETTERS = {
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8, "I": 9,
    "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "O": 6, "P": 7, "Q": 8, "R": 9,
    "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
}
UMLAUT_FOLDS = {"Ä": "A", "Ö": "O", "Ü": "U"}

VEHICLE_FIN = WeightedModulus(
    Descriptor("vehicle-fin", 11, 10, 1, NUMERIC_PLUS_X),
    TransliterationMap(FIN_LETTERS, folds=UMLAUT_FOLDS),
    CyclicWeights((3, 4, 5, 6, 7, 8, 9, 10, 1, 2), anchor="right"),
    derive=complement,
)

DOCUMENT_ALGORITHMS = (LUHN, MRTD_731, VESSEL_IMO, VEHICLE_FIN)
