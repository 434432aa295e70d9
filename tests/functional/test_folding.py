import operator

import pytest
from purefn.core.exceptions import EmptySequenceError
from purefn.functional.folding import reduce, sum_all


def test_reduce_without_initial():
    assert reduce(operator.add, [1, 2, 3]) == 6


def test_reduce_with_initial():
    assert reduce(operator.add, [1, 2, 3], 10) == 16


def test_reduce_empty_with_initial_returns_initial():
    sentinel = object()
    assert reduce(operator.add, [], sentinel) is sentinel


def test_reduce_empty_without_initial_raises():
    with pytest.raises(EmptySequenceError):
        reduce(operator.add, [])


def test_empty_sequence_error_is_value_error():
    with pytest.raises(ValueError):
        reduce(operator.add, iter(()))


def test_reduce_single_element_skips_combine():
    def combine(acc, x):
        raise AssertionError("should not be called")

    assert reduce(combine, ["only"]) == "only"


def test_reduce_folds_left_to_right():
    assert reduce(lambda acc, x: f"({acc}{x})", "abc", "") == "(((a)b)c)"


def test_reduce_does_not_mutate_inputs():
    items = [[1], [2], [3]]
    initial = [0]
    result = reduce(lambda acc, x: acc + x, items, initial)
    assert result == [0, 1, 2, 3]
    assert initial == [0]
    assert items == [[1], [2], [3]]


def test_reduce_propagates_combine_errors():
    def combine(acc, x):
        if x == 3:
            raise KeyError(x)
        return acc + x

    with pytest.raises(KeyError):
        reduce(combine, [1, 2, 3, 4])


def test_sum_all():
    assert sum_all([3, 8]) == 11
    assert sum_all([]) == 0
