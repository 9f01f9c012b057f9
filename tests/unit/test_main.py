from unittest.mock import patch

import pytest

from unitmath.main import main, parse_pattern


@pytest.fixture(autouse=True)
def mock_environment():
    """Keeps the CLI away from .env files and the global logging setup."""
    with patch("unitmath.main.Env") as MockEnv, patch(
        "unitmath.main.setup_logging"
    ) as mock_setup_logging:
        yield {"MockEnv": MockEnv, "mock_setup_logging": mock_setup_logging}


def test_main_sets_up_logging_from_env(mock_environment, capsys):
    assert main(["angle", "90"]) == 0
    env = mock_environment["MockEnv"].return_value
    env.read_env.assert_called_once_with(".env")
    mock_environment["mock_setup_logging"].assert_called_once_with(env)


def test_angle_without_conversion(capsys):
    assert main(["angle", "90"]) == 0
    assert capsys.readouterr().out == "Deg(90)\n"


def test_angle_degrees_to_radians(capsys):
    assert main(["angle", "90", "--to", "rad"]) == 0
    assert capsys.readouterr().out == "Rad(1.5708)\n"


def test_angle_double_precision(capsys):
    assert main(["angle", "3.141592653589793", "--unit", "rad", "--to", "deg", "--double"]) == 0
    assert capsys.readouterr().out == "Deg(180)\n"


def test_bits(capsys):
    assert main(["bits", "4", "0b1010"]) == 0
    assert capsys.readouterr().out == "BoolVector(0101) all=False any=True none=False\n"


def test_bits_all_set(capsys):
    assert main(["bits", "3", "0xff"]) == 0
    assert capsys.readouterr().out == "BoolVector(111) all=True any=True none=False\n"


def test_bits_invalid_pattern(capsys):
    assert main(["bits", "4", "1010b"]) == 1
    assert "Error: Invalid bit pattern '1010b'" in capsys.readouterr().out


def test_bits_negative_size(capsys):
    assert main(["bits", "-4", "0"]) == 1
    assert "Error: Vector size must be non-negative" in capsys.readouterr().out


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        main([])


@pytest.mark.parametrize("text, expected", [("10", 10), ("0b1010", 10), ("0xa", 10), ("0o12", 10)])
def test_parse_pattern(text, expected):
    assert parse_pattern(text) == expected
