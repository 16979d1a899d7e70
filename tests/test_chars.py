import pytest

from solong import chars


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "m"])
def test_is_alpha_letters(c):
    assert chars.is_alpha(c) is True
    assert chars.is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", ["0", "9", " ", "@", "[", "`", "{"])
def test_is_alpha_rejects_non_letters(c):
    assert chars.is_alpha(c) is False


def test_is_digit():
    assert all(chars.is_digit(str(d)) for d in range(10))
    assert chars.is_digit("/") is False
    assert chars.is_digit(":") is False
    assert chars.is_digit("a") is False


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert chars.is_alnum(code) == (chars.is_alpha(code) or chars.is_digit(code))


def test_is_ascii_bounds():
    assert chars.is_ascii(0) is True
    assert chars.is_ascii(127) is True
    assert chars.is_ascii(128) is False
    assert chars.is_ascii(-1) is False


def test_is_print_bounds():
    assert chars.is_print(" ") is True
    assert chars.is_print("~") is True
    assert chars.is_print(31) is False
    assert chars.is_print(127) is False


def test_case_conversion_of_strings():
    assert chars.to_upper("a") == "A"
    assert chars.to_lower("Z") == "z"
    assert chars.to_upper("5") == "5"
    assert chars.to_lower("!") == "!"


def test_case_conversion_keeps_int_type():
    assert chars.to_upper(ord("q")) == ord("Q")
    assert chars.to_lower(ord("Q")) == ord("q")
    assert chars.to_upper(200) == 200


def test_case_round_trip():
    for code in range(ord("a"), ord("z") + 1):
        assert chars.to_lower(chars.to_upper(code)) == code


def test_bad_character_argument():
    with pytest.raises(ValueError):
        chars.is_alpha("ab")
    with pytest.raises(TypeError):
        chars.is_digit(1.5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r+7", 7),
        ("123abc456", 123),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("+-5", 0),
        ("- 5", 0),
    ],
)
def test_atoi(text, expected):
    assert chars.atoi(text) == expected


def test_atoi_limits_are_32_bit():
    assert chars.atoi("2147483647") == 2147483647
    assert chars.atoi("-2147483648") == -2147483648
    assert chars.atoi("2147483648") == -2147483648


def test_atol_holds_values_beyond_int():
    assert chars.atol("2147483648") == 2147483648
    assert chars.atol("-9223372036854775808") == -9223372036854775808
    assert chars.atol("  -17xyz") == -17


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trips_through_atoi(n):
    assert chars.atoi(chars.itoa(n)) == n


def test_itoa_values():
    assert chars.itoa(0) == "0"
    assert chars.itoa(-2147483648) == "-2147483648"
    assert chars.itoa(305) == "305"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        chars.itoa("12")