"""
ISO/IEC 7064 catalogue: pure systems (recursive and polynomial) and hybrid
systems, as module-level constants.

Weight tables list `R^(k-1) mod M` for right positions k = 1..15.
"""

from __future__ import annotations

from ..engine.alphabet import (
    ALPHABETIC,
    ALPHANUMERIC,
    ALPHANUMERIC_PLUS_STAR,
    NUMERIC,
    NUMERIC_PLUS_X,
    IndexMap,
)
from ..engine.base import Descriptor
from ..engine.hybrid import HybridSystem, hybrid_descriptor
from ..engine.pure import PolynomialResidue, PureSystem
from ..engine.weights import PowerWeights

# ---- Weight tables --------------------------------------------------------------------

WEIGHTS_11_2 = (1, 2, 4, 8, 5, 10, 9, 7, 3, 6, 1, 2, 4, 8, 5)
WEIGHTS_37_2 = (1, 2, 4, 8, 16, 32, 27, 17, 34, 31, 25, 13, 26, 15, 30)
WEIGHTS_97_10 = (1, 10, 3, 30, 9, 90, 27, 76, 81, 34, 49, 5, 50, 15, 53)
WEIGHTS_661_26 = (1, 26, 15, 390, 225, 562, 70, 498, 389, 199, 547, 341, 273, 488, 129)
WEIGHTS_1271_36 = (1, 36, 25, 900, 625, 893, 373, 718, 428, 156, 532, 87, 590, 904, 769)


def _pure(name, modulus, radix, length, alphabet, excluded=""):
    return PureSystem(Descriptor(name, modulus, radix, length, alphabet), IndexMap(alphabet, excluded))


def _polynomial(name, modulus, radix, length, alphabet, table, excluded=""):
    return PureSystem(
        Descriptor(name, modulus, radix, length, alphabet),
        IndexMap(alphabet, excluded),
        residue=PolynomialResidue(PowerWeights(radix, modulus, table)),
    )


# ---- Pure systems ---------------------------------------------------------------------

# MOD 11-2: ISNI, ORCID; "X" is the check character for 10 only.
PURE_11_2 = _pure("iso7064-mod11-2", 11, 2, 1, NUMERIC_PLUS_X, excluded="X")
# MOD 37-2: ISAN; "*" is the check character for 36 only.
PURE_37_2 = _pure("iso7064-mod37-2", 37, 2, 1, ALPHANUMERIC_PLUS_STAR, excluded="*")
PURE_97_10 = _pure("iso7064-mod97-10", 97, 10, 2, NUMERIC)
PURE_661_26 = _pure("iso7064-mod661-26", 661, 26, 2, ALPHABETIC)
PURE_1271_36 = _pure("iso7064-mod1271-36", 1271, 36, 2, ALPHANUMERIC)

POLYNOMIAL_11_2 = _polynomial("iso7064-mod11-2-polynomial", 11, 2, 1, NUMERIC_PLUS_X, WEIGHTS_11_2, excluded="X")
POLYNOMIAL_37_2 = _polynomial(
    "iso7064-mod37-2-polynomial", 37, 2, 1, ALPHANUMERIC_PLUS_STAR, WEIGHTS_37_2, excluded="*"
)
POLYNOMIAL_97_10 = _polynomial("iso7064-mod97-10-polynomial", 97, 10, 2, NUMERIC, WEIGHTS_97_10)
POLYNOMIAL_661_26 = _polynomial("iso7064-mod661-26-polynomial", 661, 26, 2, ALPHABETIC, WEIGHTS_661_26)
POLYNOMIAL_1271_36 = _polynomial("iso7064-mod1271-36-polynomial", 1271, 36, 2, ALPHANUMERIC, WEIGHTS_1271_36)

# ---- Hybrid systems -------------------------------------------------------------------

# MOD 11,10: German and Croatian VAT ids, German tax id.
HYBRID_11_10 = HybridSystem(hybrid_descriptor("iso7064-mod11-10", NUMERIC))
HYBRID_27_26 = HybridSystem(hybrid_descriptor("iso7064-mod27-26", ALPHABETIC))
HYBRID_37_36 = HybridSystem(hybrid_descriptor("iso7064-mod37-36", ALPHANUMERIC))

PURE_SYSTEMS = (PURE_11_2, PURE_37_2, PURE_97_10, PURE_661_26, PURE_1271_36)
POLYNOMIAL_SYSTEMS = (POLYNOMIAL_11_2, POLYNOMIAL_37_2, POLYNOMIAL_97_10, POLYNOMIAL_661_26, POLYNOMIAL_1271_36)
HYBRID_SYSTEMS = (HYBRID_11_10, HYBRID_27_26, HYBRID_37_36)
