import pytest

from modcheck.algorithms.iso7064 import HYBRID_11_10, HYBRID_27_26, HYBRID_37_36
from modcheck.engine.alphabet import NUMERIC
from modcheck.engine.base import Descriptor
from modcheck.engine.errors import InvalidCharacterError
from modcheck.engine.hybrid import HybridSystem, hybrid_descriptor


@pytest.mark.parametrize(
    "code",
    [
        "1", "02", "004", "000000011", "128514248", "205130669", "136586130", "136695976",
        "294776378", "811128135", "999999995", "00000000010", "33392005961", "99999999994",
        "81872495633", "02476291358", "86095742719", "47036892816", "65929970489",
        "57549285017", "25768131411", "11012234564", "11234567890", "11012345675", "12720320213",
    ],
)
def test_mod11_10_valid(code):
    assert HYBRID_11_10.is_valid(code)


def test_mod11_10_invalid():
    assert not HYBRID_11_10.is_valid("11")
    assert not HYBRID_11_10.is_valid("1234567X")


def test_mod11_10_calculate():
    assert HYBRID_11_10.calculate("12851424") == "8"
    assert HYBRID_11_10.with_check_digit("1101223456") == "11012234564"


def test_mod27_26():
    assert HYBRID_27_26.is_valid("B")
    assert HYBRID_27_26.is_valid(HYBRID_27_26.with_check_digit("HYBRIDSYSTEM"))
    with pytest.raises(InvalidCharacterError) as exc:
        HYBRID_27_26.calculate("0000000000")
    assert exc.value.position == 1


@pytest.mark.parametrize("code", ["1", "02", "004", "1Z", "A12425GABC1234002M"])
def test_mod37_36_valid(code):
    assert HYBRID_37_36.is_valid(code)


def test_mod37_36_rejects_lowercase():
    assert not HYBRID_37_36.is_valid("a12425GABC1234002M")


def test_descriptor_shape():
    assert HYBRID_11_10.modulus == 11
    assert HYBRID_11_10.radix == 10
    assert HYBRID_37_36.alphabet[-1] == "Z"


def test_hybrid_requires_matching_alphabet():
    with pytest.raises(ValueError):
        HybridSystem(Descriptor("broken", 11, 10, 1, NUMERIC[:9]))


def test_hybrid_descriptor_derives_modulus():
    descriptor = hybrid_descriptor("octal", "01234567")
    assert (descriptor.modulus, descriptor.radix) == (9, 8)
