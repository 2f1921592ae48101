import pytest

from lambda_expression.codec.church import church_encode, church_decode
from lambda_expression.codec.scott import scott_encode, scott_decode
from lambda_expression.evaluation.run import run_on_integer_sequence
from lambda_expression import prelude


def _list(*values):
    return scott_encode([church_encode(v) for v in values])


@pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (3, 6), (4, 24)])
def test_factorial(n, expected):
    assert church_decode(prelude.factorial(church_encode(n))) == expected


def test_scott_map_with_factorial_matches_factorial_map():
    mapped = prelude.scott_map(prelude.factorial)(_list(0, 3))
    assert [church_decode(e) for e in scott_decode(mapped)] == [1, 6]


def test_reverse():
    reversed_ = prelude.scott_reverse(_list(1, 2, 3, 4))
    assert [church_decode(e) for e in scott_decode(reversed_)] == [4, 3, 2, 1]


@pytest.mark.parametrize("values", [[], [5], [1, 2, 3], [0, 0, 4]])
def test_sum_and_length(values):
    assert church_decode(prelude.scott_sum(_list(*values))) == sum(values)
    assert church_decode(prelude.scott_length(_list(*values))) == len(values)


def test_singleton_programs():
    assert run_on_integer_sequence([2, 3, 4], prelude.singleton_sum) == [9]
    assert run_on_integer_sequence([2, 3, 4], prelude.length_program) == [3]
    assert run_on_integer_sequence([], prelude.length_program) == [0]


def test_programs_compose():
    # reverse, then factorial of each
    composed = lambda lst: prelude.factorial_map(prelude.scott_reverse(lst))
    assert run_on_integer_sequence([1, 2, 3], composed) == [6, 2, 1]
