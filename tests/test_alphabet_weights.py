import pytest

from modcheck.algorithms.iso7064 import WEIGHTS_11_2, WEIGHTS_97_10, WEIGHTS_1271_36
from modcheck.engine.alphabet import (
    ALPHANUMERIC,
    NUMERIC,
    NUMERIC_PLUS_X,
    Base36Map,
    DecimalExpansionMap,
    IndexMap,
    TransliterationMap,
    decode,
    encode,
    positions,
)
from modcheck.engine.errors import InvalidCharacterError
from modcheck.engine.weights import CyclicWeights, FunctionWeights, LuhnWeights, PowerWeights, mod_pow


# ---- Positions ----

def test_positions_without_check_slot():
    assert list(positions("ABC")) == [("A", 1, 3), ("B", 2, 2), ("C", 3, 1)]


def test_positions_reserve_check_slot():
    assert list(positions("ABC", trailing=1)) == [("A", 1, 4), ("B", 2, 3), ("C", 3, 2)]


# ---- Character maps ----

def test_index_map_values():
    assert IndexMap(NUMERIC).values("0794") == [0, 7, 9, 4]


def test_index_map_rejects_excluded_character_with_position():
    char_map = IndexMap(NUMERIC_PLUS_X, excluded="X")
    with pytest.raises(InvalidCharacterError) as exc:
        char_map.values("07X4")
    assert exc.value.character == "X"
    assert exc.value.position == 3
    assert str(exc.value) == "Invalid Character 'X' at pos 3"


def test_index_map_unknown_character():
    with pytest.raises(InvalidCharacterError) as exc:
        IndexMap(NUMERIC).value_of("a", 5, 1)
    assert exc.value.position == 5


def test_base36_map_with_filler():
    char_map = Base36Map(extra={"<": 0})
    assert char_map.values("09AZ<") == [0, 9, 10, 35, 0]
    assert not char_map.accepts("a")
    assert char_map.accepts("<")


def test_decimal_expansion_map_splits_letters():
    assert DecimalExpansionMap().values("A1Z") == [1, 0, 1, 3, 5]


def test_transliteration_map_duplicates_and_folds():
    char_map = TransliterationMap({"A": 1, "J": 1, "U": 4}, folds={"Ü": "U"})
    assert char_map.values("AJ7Ü") == [1, 1, 7, 4]
    with pytest.raises(InvalidCharacterError):
        char_map.value_of("B", 1, 1)


# ---- Encoding ----

def test_encode_single_and_double():
    assert encode(10, NUMERIC_PLUS_X) == "X"
    assert encode(98, NUMERIC, length=2) == "98"
    assert encode(1270, ALPHANUMERIC, length=2, radix=36) == "ZA"


def test_decode_reports_position_after_offset():
    assert decode("ZA", ALPHANUMERIC, radix=36) == 1270
    with pytest.raises(InvalidCharacterError) as exc:
        decode("9?", NUMERIC, offset=4)
    assert exc.value.position == 6


# ---- Weights ----

@pytest.mark.parametrize("modulus", [11, 31, 37, 89, 97, 661, 1271])
def test_mod_pow_matches_builtin(modulus):
    for base in (2, 10, 26, 36):
        for exponent in range(0, 60):
            assert mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_mod_pow_large_exponent():
    # 10**23 % 97 cannot be reproduced in floating point
    assert mod_pow(10, 23, 97) == 56


def test_mod_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 11)


@pytest.mark.parametrize(
    "radix,modulus,table",
    [(2, 11, WEIGHTS_11_2), (10, 97, WEIGHTS_97_10), (36, 1271, WEIGHTS_1271_36)],
)
def test_power_weight_tables_match_formula(radix, modulus, table):
    assert table == tuple(pow(radix, k, modulus) for k in range(len(table)))
    weights = PowerWeights(radix, modulus, table)
    assert weights.sequence(40) == tuple(pow(radix, k, modulus) for k in range(40))


def test_power_weights_shift_gives_plain_value():
    weights = PowerWeights(10, 97, shift=2)
    assert [weights.weight(0, rp) for rp in (2, 3, 4)] == [1, 10, 3]


def test_cyclic_weights_left_and_right():
    left = CyclicWeights((7, 3, 1))
    assert [left.weight(lp, 0) for lp in range(1, 8)] == [7, 3, 1, 7, 3, 1, 7]
    right = CyclicWeights((2, 3, 4, 5, 6, 7), anchor="right", offset=2, default=1)
    assert [right.weight(0, rp) for rp in range(2, 11)] == [1, 2, 3, 4, 5, 6, 7, 2, 3]


def test_cyclic_weights_rejects_unknown_anchor():
    with pytest.raises(ValueError):
        CyclicWeights((1,), anchor="middle")


def test_function_weights():
    assert FunctionWeights(lambda lp, rp: rp).weighted_value(3, 1, 8) == 24


def test_luhn_weights_double_and_fold():
    luhn = LuhnWeights()
    assert luhn.weighted_value(9, 1, 2) == 9  # 18 -> 1 + 8
    assert luhn.weighted_value(4, 1, 2) == 8
    assert luhn.weighted_value(9, 1, 3) == 9
