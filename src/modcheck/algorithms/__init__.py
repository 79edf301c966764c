"""Concrete check digit algorithms, one module-level constant each."""

from .banking import BANKING_ALGORITHMS, IBAN, MOD97_ALPHANUMERIC, RF_CREDITOR_REFERENCE
from .documents import DOCUMENT_ALGORITHMS, LUHN, MRTD_731, VEHICLE_FIN, VESSEL_IMO
from .iso7064 import (
    HYBRID_11_10,
    HYBRID_27_26,
    HYBRID_37_36,
    HYBRID_SYSTEMS,
    POLYNOMIAL_11_2,
    POLYNOMIAL_37_2,
    POLYNOMIAL_97_10,
    POLYNOMIAL_661_26,
    POLYNOMIAL_1271_36,
    POLYNOMIAL_SYSTEMS,
    PURE_11_2,
    PURE_37_2,
    PURE_97_10,
    PURE_661_26,
    PURE_1271_36,
    PURE_SYSTEMS,
)
from .tax import HETU_FI, TAX_ALGORITHMS, TID_DK, TID_RO, VAT_BE, VAT_FI, VAT_GB, VAT_LU

ALL_ALGORITHMS = (
    PURE_SYSTEMS
    + POLYNOMIAL_SYSTEMS
    + HYBRID_SYSTEMS
    + BANKING_ALGORITHMS
    + DOCUMENT_ALGORITHMS
    + TAX_ALGORITHMS
)
