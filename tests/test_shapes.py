import pytest

from rustdrill.lessons.shapes import Rectangle, abs_all


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError, match="cannot be negative"):
        Rectangle(10, -10)


def test_zero_size():
    with pytest.raises(ValueError):
        Rectangle(0, 5)


def test_reference_mutation_copies():
    original = (-1, 0, 1)
    result = abs_all(original)
    assert list(result) == [1, 0, 1]
    assert original == (-1, 0, 1)
    assert result is not original


def test_reference_no_mutation_keeps_input():
    original = (0, 1, 2)
    result = abs_all(original)
    assert result is original
    assert result == (0, 1, 2)


def test_owned_no_mutation():
    original = [0, 1, 2]
    result = abs_all(original)
    assert result is original
    assert result == [0, 1, 2]


def test_owned_mutation():
    original = [-1, 0, 1]
    result = abs_all(original)
    assert result == [1, 0, 1]
    assert original == [-1, 0, 1]