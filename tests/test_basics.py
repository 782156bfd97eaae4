import pytest

from rustlings.lessons.basics import (
    Rectangle,
    Wrapper,
    array_and_vec,
    bigger,
    foo_if_fizz,
    is_even,
    sale_price,
    square,
    vec_loop,
    vec_map,
)


def test_sale_price_of_example():
    assert sale_price(51) == 48


def test_square_of_three():
    assert square(3) == 9


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_array_and_vec_similarity():
    array, vector = array_and_vec()
    assert list(array) == vector


def test_vec_loop():
    values = [2, 4, 6, 8, 10]
    assert vec_loop(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_vec_map():
    assert vec_map([2, 4, 6, 8, 10]) == [4, 8, 12, 16, 20]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_is_true_when_even():
    assert is_even(0) is True


def test_is_false_when_odd():
    assert is_even(1) is False
    assert is_even(5) is False


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)