import math
import operator

import pytest
from purefn import compose, curry, identity, map, reduce, sqrt_all, sum_all


@pytest.fixture(params=[[], [1], [3, 1, 4, 1, 5], list(range(20))])
def sequence(request):
    return request.param


def square(x):
    return x * x


def test_identity_law(sequence):
    assert map(identity, sequence) == sequence


def test_composition_law(sequence):
    f = curry(operator.add, 3)
    assert map(compose(f, square), sequence) == map(f, map(square, sequence))


def test_map_then_reduce(sequence):
    assert reduce(operator.add, map(square, sequence), 0) == sum(
        x * x for x in sequence
    )


def test_article_pipeline():
    assert compose(sum_all, sqrt_all)([9, 64]) == 11
    assert curry(map, math.sqrt)([9, 64]) == [3, 8]
    assert curry(operator.add, 5)(2) == 7

