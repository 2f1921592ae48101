"""Run a calculus program over a sequence of natural numbers.

The pipeline mirrors the encodings on both sides of the program:

    ints --church_encode--> numerals --scott_encode--> list
    program(list) --scott_decode--> numerals --church_decode--> ints

If `program` maps a Scott list of Church numerals to another such list, the
emitted integers are exactly what reduction of `program` would produce.
Programs of any other shape get best-effort behaviour; nothing is validated.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from lambda_expression import NativeSink
from lambda_expression.types.expression import Expression
from lambda_expression.types.sink import Sink
from lambda_expression.codec.church import church_encode, church_decode
from lambda_expression.codec.scott import scott_encode, scott_decode
from lambda_expression.runtime_context import recursion_limit

logger = logging.getLogger(__name__)


def run_on_integer_sequence(
    values: Iterable[int],
    program: Expression,
    sink: Optional[NativeSink] = None,
) -> Optional[list[int]]:
    """Apply `program` to the encoded `values` and decode what it returns.

    Decoded integers go to `sink` in list order; without a sink they are
    collected and returned.
    """
    if sink is None:
        out, collected = Sink.collecting()
    else:
        out, collected = Sink(sink), None

    numerals = [church_encode(v) for v in values]
    logger.debug("encoded %d input values", len(numerals))

    with recursion_limit():
        result = Expression.of(program)._apply_strict(scott_encode(numerals))
        elements = scott_decode(result)
        logger.debug("program produced %d list elements", len(elements))
        for element in elements:
            out.emit(church_decode(element))
    return collected
