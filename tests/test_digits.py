import pytest

from ocr_engine.digits import DigitSet


def test_of_and_iteration_are_sorted():
    s = DigitSet.of(9, 0, 4)
    assert list(s) == [0, 4, 9]
    assert len(s) == 3
    assert 4 in s
    assert 5 not in s


def test_union_and_intersection():
    a = DigitSet.of(1, 4)
    b = DigitSet.of(4, 8, 9)
    assert (a | b).digits() == [1, 4, 8, 9]
    assert (a & b).digits() == [4]


def test_universal_is_intersection_identity():
    s = DigitSet.of(2, 3)
    assert DigitSet.universal() & s == s
    assert s & DigitSet.universal() == s
    assert len(DigitSet.universal()) == 10


def test_intersection_algebra():
    a = DigitSet.of(0, 2, 3, 5, 6, 7, 8, 9)
    b = DigitSet.of(4, 8, 9)
    c = DigitSet.of(3, 5, 9)
    assert a & b == b & a
    assert (a & b) & c == a & (b & c)
    assert a & a == a


def test_single():
    assert DigitSet.of(7).single() == 7
    assert DigitSet.of(0).single() == 0
    with pytest.raises(ValueError):
        DigitSet.of(1, 7).single()
    with pytest.raises(ValueError):
        DigitSet.empty().single()


def test_rejects_out_of_range():
    with pytest.raises(ValueError):
        DigitSet.of(10)
    with pytest.raises(ValueError):
        DigitSet(1 << 10)
    with pytest.raises(ValueError):
        DigitSet(-1)
