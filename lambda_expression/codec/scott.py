"""Scott-encoded lists.

A list cell is `cons(head)(tail)`: applied to a handler it calls
handler(head)(tail). `empty_list` ignores the handler. Native code cannot
pattern-match on that shape, so decoding builds a stepper term and lets the
Y combinator drive it down the list.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Optional

from lambda_expression import NativeSink
from lambda_expression.types.expression import Expression
from lambda_expression.types.sink import Sink
from lambda_expression.combinators import I, Y, car, cdr, cons, empty_list, is_empty
from lambda_expression.runtime_context import recursion_limit


def scott_encode(items: Iterable[Expression]) -> Expression:
    """Right-fold `items` with `cons`, seeded by `empty_list`; order is preserved."""
    return reduce(lambda acc, item: cons(item)(acc), reversed(list(items)), empty_list)


def scott_decode(lst: Expression, sink: Optional[NativeSink] = None) -> Optional[list[Expression]]:
    """Emit every element of `lst`, head first.

    Elements are written to `sink` (a callable or anything with `append`).
    Without a sink they are collected and returned as a list.
    Terminates for any finite list; a cyclic list-shaped value diverges.
    """
    if sink is None:
        out, collected = Sink.collecting()
    else:
        out, collected = Sink(sink), None

    def stepper(rest: Expression):
        def step(cell: Expression) -> Expression:
            def emit_then_recurse(_: Expression) -> Expression:
                # Write the head before descending so emission follows list order
                out.emit(car._apply_strict(cell))
                return rest._apply_strict(cdr._apply_strict(cell))._apply_strict(_)

            return (
                is_empty._apply_strict(cell)
                ._apply_strict(empty_list)
                ._apply_strict(emit_then_recurse)
            )
        return step

    with recursion_limit():
        (
            Y._apply_strict(stepper)
            ._apply_strict(lst)
            ._apply_strict(I)
            ._apply_strict(I)
        )
    return collected
