import pytest

from lambda_expression.types.expression import Expression
from lambda_expression.combinators import I, Y, K
from lambda_expression.errors import ExpressionTypeError, LambdaExpressionError


def _recorder(calls):
    def record(x):
        calls.append(x)
        return x
    return Expression(record)


def test_public_application_does_not_run_the_function():
    calls = []
    f = _recorder(calls)
    a = Expression(lambda x: x)
    applied = f(a)
    assert isinstance(applied, Expression)
    assert calls == []


def test_deferred_application_runs_when_applied_again():
    calls = []
    f = _recorder(calls)
    a = Expression(lambda x: x)
    result = f(a)._apply_strict(I)
    # f ran on a, then a (the identity) ran on I
    assert calls == [a]
    assert result is I


def test_each_application_of_a_deferred_value_reruns_the_function():
    calls = []
    applied = _recorder(calls)(I)
    applied._apply_strict(I)
    applied._apply_strict(I)
    assert calls == [I, I]


def test_strict_application_runs_immediately():
    calls = []
    f = _recorder(calls)
    assert f._apply_strict(I) is I
    assert calls == [I]


def test_plain_callables_are_wrapped():
    seen = []

    def outer(x):
        seen.append(x)
        return lambda y: x

    e = Expression(outer)
    inner = e._apply_strict(lambda z: z)
    assert isinstance(seen[0], Expression)
    assert isinstance(inner, Expression)
    assert inner._apply_strict(I) is seen[0]


def test_of_returns_expressions_unchanged():
    assert Expression.of(I) is I
    assert isinstance(Expression.of(lambda x: x), Expression)


@pytest.mark.parametrize("bad", [1, "x", None, 2.5])
def test_non_callables_are_rejected(bad):
    with pytest.raises(ExpressionTypeError):
        Expression(bad)
    # usable both as a library error and as a plain TypeError
    with pytest.raises(TypeError):
        Expression.of(bad)
    with pytest.raises(LambdaExpressionError):
        I(bad)


def test_non_callable_result_is_rejected_on_strict_application():
    e = Expression(lambda x: 42)
    with pytest.raises(ExpressionTypeError):
        e._apply_strict(I)


def test_self_application_builds_without_recursing():
    # Building Y(f) for a function that would loop forever if run eagerly
    looping = Y(lambda f: lambda x: f(x))
    assert isinstance(looping, Expression)
    omega = Expression(lambda x: x(x))
    assert isinstance(omega(omega), Expression)


def test_application_result_is_always_an_expression():
    assert isinstance(K(I)(I), Expression)
    assert isinstance(K._apply_strict(I)._apply_strict(I), Expression)


def test_repr_names_the_wrapped_function():
    def double_back(x):
        return x

    assert "double_back" in repr(Expression(double_back))
