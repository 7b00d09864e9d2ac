import random
import sys
from fractions import Fraction

import pytest

from windows import ValueNotFound, EmptyWindow, WINDOW_REGISTRY
from windows.core import average
from windows.sorted_window import SortedWindow
from windows.heap_window import HeapWindow


def naive_median(values):
    s = sorted(values)
    m = len(s) // 2
    return s[m] if len(s) % 2 else (s[m - 1] + s[m]) / 2.0


def test_registry():
    assert WINDOW_REGISTRY["sorted"] is SortedWindow
    assert WINDOW_REGISTRY["heap"] is HeapWindow


def test_odd_and_even(window_cls):
    window = window_cls()
    window.insert(5)
    assert window.median() == 5
    window.insert(1)
    assert window.median() == 3.0
    assert isinstance(window.median(), float)
    window.insert(10)
    assert window.median() == 5
    assert isinstance(window.median(), int)
    window.insert(2)
    assert window.median() == 3.5


def test_odd_median_keeps_type(window_cls):
    window = window_cls()
    for x in [1.5, 0.25, 7.75]:
        window.insert(x)
    assert window.median() == 1.5


def test_median_is_idempotent(window_cls):
    window = window_cls()
    for x in [4, -2, 9, 9]:
        window.insert(x)
    assert window.median() == window.median() == 6.5
    assert len(window) == 4


def test_empty_window(window_cls):
    window = window_cls()
    with pytest.raises(EmptyWindow):
        window.median()
    window.insert(3)
    window.remove(3)
    with pytest.raises(EmptyWindow):
        window.median()


def test_remove_unknown_value(window_cls):
    window = window_cls()
    with pytest.raises(ValueNotFound):
        window.remove(1)
    window.insert(1)
    window.insert(2)
    with pytest.raises(ValueNotFound) as excinfo:
        window.remove(3)
    assert excinfo.value.value == 3
    assert len(window) == 2
    window.check_invariants()
    window.remove(2)
    with pytest.raises(ValueNotFound):
        window.remove(2)
    assert window.median() == 1


def test_value_not_found_is_key_error():
    window = SortedWindow()
    with pytest.raises(KeyError):
        window.remove(0)


def test_duplicates(window_cls):
    window = window_cls()
    for _ in range(4):
        window.insert(2)
        window.check_invariants()
    assert window.median() == 2
    assert len(window.low) == 2
    assert len(window.high) == 2


def test_insert_equal_to_low_max_goes_low(window_cls):
    window = window_cls()
    window.insert(1)
    window.insert(5)
    # low=[1], high=[5]; 1 is routed to the lower half before rebalancing
    window.insert(1)
    assert list(window.low) == [1, 1]
    assert list(window.high) == [5]
    assert window.median() == 1


def test_negative_values(window_cls):
    window = window_cls()
    for x in [-10, -5, -7]:
        window.insert(x)
    assert window.median() == -7
    window.remove(-10)
    assert window.median() == -6.0


def test_clear(window_cls):
    window = window_cls()
    for x in range(5):
        window.insert(x)
    window.clear()
    assert len(window) == 0
    window.insert(8)
    assert window.median() == 8


def test_check_invariants_detects_corruption():
    window = SortedWindow()
    for x in [1, 2, 3]:
        window.insert(x)
    window.high.push(0)
    with pytest.raises(AssertionError):
        window.check_invariants()


def test_random_insert_remove(window_cls):
    rg = random.Random(1)
    window = window_cls()
    tracked = []
    inserts, removes = 0, 0
    for _ in range(3000):
        if tracked and rg.random() < 0.45:
            x = rg.choice(tracked)
            window.remove(x)
            tracked.remove(x)
            removes += 1
        else:
            x = rg.randint(-50, 50)
            window.insert(x)
            tracked.append(x)
            inserts += 1
        window.check_invariants()
        assert len(window) == len(tracked) == inserts - removes
        if tracked:
            assert window.median() == naive_median(tracked)
        assert sorted(list(window.low) + list(window.high)) == sorted(tracked)


def test_heap_window_options():
    class Args(object):
        heap_compaction_factor = 0
    window = HeapWindow(Args())
    assert window.compaction_factor is None
    assert window.low.compaction_factor is None
    assert HeapWindow().low.compaction_factor == 2.0


def test_even_median_near_float_max(window_cls):
    big = sys.float_info.max
    window = window_cls()
    window.insert(big)
    window.insert(big)
    assert window.median() == big
    window.insert(-big)
    window.insert(-big)
    window.remove(big)
    window.remove(big)
    assert window.median() == -big
    window.insert(big)
    window.insert(big)
    assert window.median() == 0.0


def test_even_median_of_huge_ints(window_cls):
    window = window_cls()
    window.insert(10**400)
    window.insert(10**400)
    assert window.median() == 10**400
    window.insert(10**400 + 1)
    window.remove(10**400)
    assert window.median() == Fraction(2 * 10**400 + 1, 2)
    window.insert(3)
    window.insert(5)
    # a mean that fits into a float is a float again
    window.remove(10**400)
    window.remove(10**400 + 1)
    assert window.median() == 4.0
    assert isinstance(window.median(), float)


def test_average():
    big = sys.float_info.max
    assert average(big, big) == big
    assert average(big, -big) == 0.0
    assert average(1, 5) == 3.0
    assert average(10**400, -10**400) == 0.0
    assert average(10**400, 1.5) == Fraction(10**400) / 2 + Fraction(3, 4)
    assert average(float("inf"), 1.0) == float("inf")
