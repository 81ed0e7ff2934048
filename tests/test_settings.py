import pytest

from philosophers.settings import (
    ArgumentError,
    Settings,
    check_args,
    is_valid_number,
    parse_long,
    parse_settings,
)


@pytest.mark.parametrize("text", ["0", "42", "+42", "2147483647", "0000000001"])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text", ["-5", "12a", "2147483648", "12345678901", "+2147483648", " 1", "1.5"]
)
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_parse_long_skips_whitespace_and_stops_at_non_digit():
    assert parse_long("  -42abc") == -42
    assert parse_long("\t+17") == 17
    assert parse_long("x12") == 0


def test_parse_long_roundtrip():
    for value in (0, 1, 999, 2147483647):
        assert parse_long(str(value)) == value


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_check_args_wrong_count(argv):
    with pytest.raises(ArgumentError, match="Number of arguments not valid"):
        check_args(argv)


def test_check_args_bad_number():
    with pytest.raises(ArgumentError, match="Error in the number"):
        check_args(["5", "800", "-200", "200"])


def test_parse_settings_without_limit():
    settings = parse_settings(["5", "800", "200", "100"])
    assert settings == Settings(5, 800, 200, 100, None)


def test_parse_settings_with_limit():
    settings = parse_settings(["4", "410", "200", "200", "+7"])
    assert settings.meal_limit == 7
    assert settings.philosopher_count == 4


def test_parse_settings_zero_time_rejected():
    with pytest.raises(ArgumentError, match="Error in the number"):
        parse_settings(["4", "0", "200", "200"])


def test_parse_settings_zero_philosophers_rejected():
    with pytest.raises(ArgumentError, match="Error in the number"):
        parse_settings(["0", "400", "200", "200"])


def test_parse_settings_zero_meal_limit_allowed():
    assert parse_settings(["4", "400", "200", "200", "0"]).meal_limit == 0


def test_think_time_even_count():
    assert Settings(4, 400, 200, 100).think_time_us() == 1000


def test_think_time_odd_count():
    assert Settings(5, 800, 200, 100).think_time_us() == 300000