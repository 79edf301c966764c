"""Round-trip and character-set closure over the whole catalogue."""

import random

import pytest

from modcheck.algorithms import ALL_ALGORITHMS, TID_DK
from modcheck.engine.errors import CheckDigitError, InvalidCharacterError

# Payload characters each algorithm accepts, for generating inputs.
DIGITS = "0123456789"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
PAYLOAD_CHARACTERS = {
    "iso7064-mod11-2": DIGITS,
    "iso7064-mod37-2": DIGITS + UPPER,
    "iso7064-mod661-26": UPPER,
    "iso7064-mod1271-36": DIGITS + UPPER,
    "iso7064-mod27-26": UPPER,
    "iso7064-mod37-36": DIGITS + UPPER,
    "mod97-10-alphanumeric": DIGITS + UPPER,
    "iban": DIGITS + UPPER,
    "rf-creditor-reference": DIGITS + UPPER,
    "mrtd": DIGITS + UPPER + "<",
    "vehicle-fin": DIGITS + UPPER,
}


def payload_characters(algorithm):
    name = algorithm.name.replace("-polynomial", "")
    return PAYLOAD_CHARACTERS.get(name, DIGITS)


def ids(algorithm):
    return algorithm.name


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS, ids=ids)
def test_round_trip(algorithm):
    rng = random.Random(algorithm.name)
    chars = payload_characters(algorithm)
    accepted = 0
    for length in range(5, 25):
        for _ in range(10):
            payload = "".join(rng.choice(chars) for _ in range(length))
            try:
                code = algorithm.with_check_digit(payload)
            except CheckDigitError:
                # disallowed check values (DK non-zero remainder, FI VAT 10)
                continue
            accepted += 1
            assert algorithm.is_valid(code), (payload, code)
    assert accepted > 0


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS, ids=ids)
@pytest.mark.parametrize("bad", ["?", " ", "-", "é", "ß"])
def test_character_closure(algorithm, bad):
    payload = "123456"
    if payload_characters(algorithm) == UPPER:
        payload = "ABCDEF"
    broken = payload[:5] + bad + payload[5:]
    with pytest.raises(InvalidCharacterError) as exc:
        algorithm.calculate(broken)
    assert exc.value.character == bad
    assert exc.value.position == 6
    assert not algorithm.is_valid(broken + "00")


@pytest.mark.parametrize("algorithm", ALL_ALGORITHMS, ids=ids)
def test_never_raises_on_garbage(algorithm):
    for code in (None, "", " ", "\t", "?", "??", "0", "00", "X", "*", "<", "é" * 10, "1" * 40):
        assert algorithm.is_valid(code) in (True, False)


def test_zero_remainder_round_trip_keeps_payload():
    assert TID_DK.with_check_digit("13585628") == "13585628"
