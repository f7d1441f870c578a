"""Tests for ordering primitives."""

from twig.common import Box, Flip, Ordering, compare


def test_compare_ints():
    assert compare(1, 2) == Ordering.Lt
    assert compare(2, 1) == Ordering.Gt
    assert compare(1, 1) == Ordering.Eq


def test_compare_strings():
    assert compare("apple", "banana") == Ordering.Lt
    assert compare("zebra", "apple") == Ordering.Gt


def test_flip_comparison():
    """Test Flip wrapper reverses comparison results."""
    assert compare(Flip(1), Flip(2)) == Ordering.Gt
    assert compare(Flip(2), Flip(1)) == Ordering.Lt
    assert compare(Flip(1), Flip(1)) == Ordering.Eq


def test_flip_ordering_operators():
    assert Flip(1) > Flip(2)
    assert Flip(2) < Flip(1)
    assert Flip(1) >= Flip(1)
    assert Flip(1) <= Flip(1)
    assert Flip(1) == Flip(1)
    assert Flip(1) != Flip(2)
    assert Flip(1) != 1


def test_flip_hash_follows_value():
    assert hash(Flip(3)) == hash(Flip(3))
    assert len({Flip(3), Flip(3), Flip(4)}) == 2


def test_flip_sorting():
    values = [Flip(x) for x in [3, 1, 4, 1, 5]]
    assert [f.value for f in sorted(values)] == [5, 4, 3, 1, 1]


def test_box_holds_value():
    box = Box(1)
    box.value = 2
    assert box.value == 2


def test_compare_mixed_numbers():
    """Ints and floats compare by value, whichever side holds the float."""
    assert compare(1, 2.5) == Ordering.Lt
    assert compare(2.5, 1) == Ordering.Gt
    assert compare(3, 3.0) == Ordering.Eq
    assert compare(3.0, 3) == Ordering.Eq
