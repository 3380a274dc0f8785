import pytest

from classkit.biginteger import MAXIMUM_DIGITS, BigInteger, InvalidFormat

DEMO_TEXT = "1234567890987654321012345678909876543210000000000"


@pytest.mark.parametrize("text", ["1", "9999", DEMO_TEXT, "9" * MAXIMUM_DIGITS])
def test_string_round_trip(text):
    assert str(BigInteger(text)) == text


@pytest.mark.parametrize("text", ["", "0", "0000"])
def test_zero_strings(text):
    value = BigInteger(text)
    assert str(value) == "0"
    assert value.number_of_digits() == 0
    assert int(value) == 0


def test_leading_zeros_are_dropped():
    assert str(BigInteger("000123")) == "123"
    assert BigInteger("000123").number_of_digits() == 3


def test_leading_zeros_do_not_count_toward_limit():
    text = "000" + "9" * MAXIMUM_DIGITS
    assert BigInteger(text).number_of_digits() == MAXIMUM_DIGITS


@pytest.mark.parametrize("text", ["12a", "-5", " 1", "1.0", "+3"])
def test_non_digits_rejected(text):
    with pytest.raises(InvalidFormat):
        BigInteger(text)


def test_too_many_digits_overflows():
    with pytest.raises(OverflowError):
        BigInteger("1" + "0" * MAXIMUM_DIGITS)


@pytest.mark.parametrize("number", [0, 1, 9999, 2**64 - 1])
def test_int_round_trip(number):
    assert int(BigInteger(number)) == number


def test_negative_int_rejected():
    with pytest.raises(ValueError):
        BigInteger(-1)


def test_number_of_digits_matches_text():
    assert BigInteger(9999).number_of_digits() == len("9999")
    assert BigInteger(DEMO_TEXT).number_of_digits() == len(DEMO_TEXT)


def test_copy_construction_equal():
    original = BigInteger(DEMO_TEXT)
    assert BigInteger(original) == original


def test_addition_matches_int():
    a = BigInteger(DEMO_TEXT)
    b = BigInteger(9999)
    assert int(a + b) == int(DEMO_TEXT) + 9999


def test_addition_with_int_and_str_operands():
    a = BigInteger(5)
    assert a + 3 == BigInteger(5 + 3)
    assert 3 + a == a + 3
    assert a + "7" == BigInteger(5 + 7)


def test_addition_commutes():
    a = BigInteger(DEMO_TEXT)
    b = BigInteger("987654321")
    assert a + b == b + a


def test_addition_overflow():
    with pytest.raises(OverflowError):
        BigInteger("9" * MAXIMUM_DIGITS) + 1


def test_subtraction_inverse_of_addition():
    a = BigInteger(DEMO_TEXT)
    b = BigInteger(9999)
    assert (a + b) - b == a


def test_subtraction_underflow():
    with pytest.raises(ArithmeticError):
        BigInteger(3) - BigInteger(4)


def test_multiplication_matches_int():
    a = BigInteger("123456789012345678901234567890")
    b = BigInteger(9999)
    assert int(a * b) == int("123456789012345678901234567890") * 9999


def test_multiplication_overflow():
    with pytest.raises(OverflowError):
        BigInteger("1" + "0" * 64) * BigInteger("1" + "0" * 64)


def test_division_and_modulus_invariant():
    a = BigInteger(DEMO_TEXT)
    b = BigInteger(9999)
    assert (a // b) * b + (a % b) == a
    assert a % b < b


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInteger(10) // BigInteger(0)
    with pytest.raises(ZeroDivisionError):
        BigInteger(10) % 0


def test_hash_consistent_with_equality():
    assert hash(BigInteger("00042")) == hash(BigInteger(42))
    assert len({BigInteger(42), BigInteger("42")}) == 1


def test_ordering():
    assert BigInteger(1) < BigInteger(DEMO_TEXT)
    assert BigInteger(DEMO_TEXT) > 1


def test_in_place_addition_leaves_other_unchanged():
    a = BigInteger(10)
    b = a
    a += 5
    assert int(b) == 10
    assert int(a) == 15