"""The Expression value type: a lambda term represented as a host closure.

An Expression wraps a one-argument Python function whose result is again an
Expression. Application is call-by-name: `f(a)` does not run `f` at all, it
returns a new Expression that, when itself applied to some `z`, first runs
`f` on `a` and then runs that result on `z`:

    f(a)  ==  λz. strict(strict(f, a), z)

One public application is therefore one unit of deferral. This is what lets
self-applying terms such as the Y combinator be *built* without the host
recursing forever; computation happens only once enough applications pile up
and someone forces them. The conventional way to force is to strictly apply
the chain to the identity combinator twice (see the codecs).

Plain Python callables are accepted wherever an Expression is expected and
are wrapped on the way in and on the way out of a strict application, so
combinator bodies can be written as ordinary nested lambdas.
"""

from __future__ import annotations

from typing import Any

from lambda_expression import ExpressionFn
from lambda_expression.errors import ExpressionTypeError


class Expression:
    """An immutable lambda-calculus value with deferred application."""

    __slots__ = ("_fn",)

    def __init__(self, fn: ExpressionFn):
        if isinstance(fn, Expression):
            fn = fn._fn
        elif not callable(fn):
            raise ExpressionTypeError(f"Cannot use non-function {fn!r} as an Expression")
        self._fn = fn

    @classmethod
    def of(cls, value: Any) -> Expression:
        """Return `value` itself if it is an Expression, else wrap it."""
        if isinstance(value, Expression):
            return value
        return cls(value)

    def __call__(self, arg: Any) -> Expression:
        """Call-by-name application; nothing is evaluated until the result is applied."""
        arg = Expression.of(arg)
        return Expression(lambda _: self._apply_strict(arg)._apply_strict(_))

    def _apply_strict(self, arg: Any) -> Expression:
        # Runs the wrapped function now. Reserved for the codecs and for the
        # closure built by __call__; calculus code uses __call__.
        if not isinstance(arg, Expression):
            arg = Expression(arg)
        result = self._fn(arg)
        if isinstance(result, Expression):
            return result
        return Expression(result)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", None) or type(self._fn).__name__
        return f"<Expression {name}>"
