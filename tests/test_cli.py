import logging

import pytest
from typer.testing import CliRunner
from modcheck.__main__ import main
from modcheck.cli import LIBRARY_HANDLER, app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_library_logging():
    yield
    library = logging.getLogger("modcheck")
    for handler in [h for h in library.handlers if h.get_name() == LIBRARY_HANDLER]:
        library.removeHandler(handler)
    library.setLevel(logging.NOTSET)


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "check digit" in result.stdout


def test_main_is_callable():
    assert callable(main)


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "modcheck 0.1.0" in result.stdout


def test_list():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "iso7064-mod97-10" in result.stdout
    assert "vat-gb" in result.stdout


def test_calculate():
    result = runner.invoke(app, ["calculate", "mrtd", "L898902C3"])
    assert result.exit_code == 0
    assert "Check digit: 6" in result.stdout
    assert "Code: L898902C36" in result.stdout


def test_calculate_iban_places_check_digits():
    result = runner.invoke(app, ["calculate", "iban", "GB00NWBK60161331926819"])
    assert result.exit_code == 0
    assert "Code: GB29NWBK60161331926819" in result.stdout


def test_calculate_error():
    result = runner.invoke(app, ["calculate", "iso7064-mod11-2", "07X4"])
    assert result.exit_code == 1
    assert "Invalid Character 'X' at pos 3" in result.stdout


def test_unknown_algorithm():
    result = runner.invoke(app, ["calculate", "mod42", "1234"])
    assert result.exit_code == 1
    assert "Unknown algorithm" in result.stdout


def test_validate_all_valid():
    result = runner.invoke(app, ["validate", "vat-gb", "123456782", "123456727", "980780684001"])
    assert result.exit_code == 0
    assert result.stdout.count("valid") == 3
    assert "invalid" not in result.stdout


def test_validate_reports_invalid_codes():
    result = runner.invoke(app, ["validate", "luhn", "4111111111111111", "4111111111111112", "41a1"])
    assert result.exit_code == 1
    assert "invalid 4111111111111112 (check digit mismatch)" in result.stdout
    assert "Invalid Character 'a' at pos 3" in result.stdout


def test_weights():
    result = runner.invoke(app, ["weights", "iso7064-mod11-2", "--count", "15"])
    assert result.exit_code == 0
    assert "1, 2, 4, 8, 5, 10, 9, 7, 3, 6, 1, 2, 4, 8, 5" in result.stdout


def test_weights_needs_pure_system():
    result = runner.invoke(app, ["weights", "luhn"])
    assert result.exit_code == 1


def test_config_adds_custom_algorithm(tmp_path):
    path = tmp_path / ".modcheck.yaml"
    path.write_text(
        "algorithms:\n"
        "  - kind: hybrid\n"
        "    name: octal-hybrid\n"
        "    modulus: 9\n"
        "    alphabet: '01234567'\n"
    )
    result = runner.invoke(app, ["--config", str(path), "list"])
    assert result.exit_code == 0
    assert "octal-hybrid" in result.stdout


def test_bad_config_is_rejected(tmp_path):
    path = tmp_path / ".modcheck.yaml"
    path.write_text("algorithms:\n  - kind: hybrid\n    name: luhn\n    modulus: 11\n    alphabet: '0123456789'\n")
    result = runner.invoke(app, ["--config", str(path), "list"])
    assert result.exit_code == 2


def test_verbose_shows_library_debug_records():
    result = runner.invoke(app, ["-v", "validate", "vat-gb", "123456727"])
    assert result.exit_code == 0
    assert "accepted '123456727' with offset 55" in result.output


def test_library_debug_records_hidden_by_default():
    result = runner.invoke(app, ["validate", "vat-gb", "123456727"])
    assert result.exit_code == 0
    assert "offset 55" not in result.output
