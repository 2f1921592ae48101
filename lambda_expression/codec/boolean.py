from __future__ import annotations

from lambda_expression.types.expression import Expression
from lambda_expression.errors import DecodeError
from lambda_expression.runtime_context import recursion_limit


def boolean_encode(flag: bool) -> Expression:
    from lambda_expression.combinators import truth, falsity
    return truth if flag else falsity


def boolean_decode(expr: Expression) -> bool:
    """Decode a Church boolean by seeing which of two markers it selects.

    Raises DecodeError when neither branch is taken.
    """
    from lambda_expression.combinators import I

    chosen: list[bool] = []

    def mark(flag: bool) -> Expression:
        def record(x: Expression) -> Expression:
            chosen.append(flag)
            return x
        return Expression(record)

    with recursion_limit():
        Expression.of(expr)._apply_strict(mark(True))._apply_strict(mark(False))._apply_strict(I)
    if not chosen:
        raise DecodeError(f"{expr!r} did not select either branch")
    return chosen[0]
