"""Check digit engine: character model, weightings and the three system families."""

from .base import CheckDigit, Descriptor
from .errors import (
    CheckDigitError,
    CodeTooLongError,
    CodeTooShortError,
    InvalidCharacterError,
    InvalidCheckDigitValueError,
    MissingCodeError,
    ZeroSumError,
)
from .hybrid import HybridSystem, hybrid_descriptor
from .pure import PolynomialResidue, PureSystem, RecursiveResidue
from .weighted import WeightedModulus

__all__ = [
    "CheckDigit",
    "CheckDigitError",
    "CodeTooLongError",
    "CodeTooShortError",
    "Descriptor",
    "HybridSystem",
    "InvalidCharacterError",
    "InvalidCheckDigitValueError",
    "MissingCodeError",
    "PolynomialResidue",
    "PureSystem",
    "RecursiveResidue",
    "WeightedModulus",
    "ZeroSumError",
    "hybrid_descriptor",
]
