"""Church numerals: n is "apply the given function n times to the given argument"."""

from __future__ import annotations

from lambda_expression.types.expression import Expression
from lambda_expression.runtime_context import recursion_limit


def church_encode(n: int) -> Expression:
    """Encode a natural number; `church_encode(0)` leaves the inner argument alone."""
    def numeral(f: Expression):
        def iterate(x: Expression) -> Expression:
            for _ in range(n):
                x = f(x)
            return x
        return iterate
    return Expression(numeral)


def church_decode(numeral: Expression) -> int:
    """Count how many times `numeral` applies its function argument.

    The numeral is strictly applied to a host counter that increments and
    passes its argument through; the resulting chain of deferred
    applications is then forced by two strict applications to `I`.
    """
    # Lazy import to avoid circular import with the combinator library
    from lambda_expression.combinators import I

    count = 0

    def tick(x: Expression) -> Expression:
        nonlocal count
        count += 1
        return x

    with recursion_limit():
        Expression.of(numeral)._apply_strict(tick)._apply_strict(I)._apply_strict(I)
    return count
