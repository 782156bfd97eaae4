import pytest

from rustlings.lessons.colors import Color, ColorErrorKind, IntoColorError


def _kind(call):
    with pytest.raises(IntoColorError) as info:
        call()
    return info.value.kind


def test_tuple_out_of_range_positive():
    assert _kind(lambda: Color.from_rgb(256, 1000, 10000)) is ColorErrorKind.INT_CONVERSION


def test_tuple_out_of_range_negative():
    assert _kind(lambda: Color.from_rgb(-1, -10, -256)) is ColorErrorKind.INT_CONVERSION


def test_tuple_sum():
    assert _kind(lambda: Color.from_rgb(-1, 255, 255)) is ColorErrorKind.INT_CONVERSION


def test_tuple_correct():
    assert Color.from_rgb(183, 65, 14) == Color(red=183, green=65, blue=14)


def test_array_out_of_range_positive():
    assert _kind(lambda: Color.from_rgb(*[1000, 10000, 256])) is ColorErrorKind.INT_CONVERSION


def test_array_out_of_range_negative():
    assert _kind(lambda: Color.from_rgb(*[-10, -256, -1])) is ColorErrorKind.INT_CONVERSION


def test_array_sum():
    assert _kind(lambda: Color.from_rgb(*[-1, 255, 255])) is ColorErrorKind.INT_CONVERSION


def test_array_correct():
    assert Color.from_rgb(*[183, 65, 14]) == Color(red=183, green=65, blue=14)


def test_slice_out_of_range_positive():
    assert _kind(lambda: Color.from_sequence([10000, 256, 1000])) is ColorErrorKind.INT_CONVERSION


def test_slice_out_of_range_negative():
    assert _kind(lambda: Color.from_sequence([-256, -1, -10])) is ColorErrorKind.INT_CONVERSION


def test_slice_sum():
    assert _kind(lambda: Color.from_sequence([-1, 255, 255])) is ColorErrorKind.INT_CONVERSION


def test_slice_correct():
    assert Color.from_sequence([183, 65, 14]) == Color(red=183, green=65, blue=14)


def test_slice_excess_length():
    assert _kind(lambda: Color.from_sequence([0, 0, 0, 0])) is ColorErrorKind.BAD_LEN


def test_slice_insufficient_length():
    assert _kind(lambda: Color.from_sequence([0, 0])) is ColorErrorKind.BAD_LEN


def test_bounds_are_inclusive():
    assert Color.from_sequence((0, 255, 0)) == Color(0, 255, 0)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        Color.from_rgb(0, 0, 300)