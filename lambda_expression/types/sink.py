from __future__ import annotations

from typing import Any, Callable

from lambda_expression import NativeSink
from lambda_expression.errors import ExpressionTypeError


class Sink:
    """Narrow handle on a caller's output, captured by decoder closures.

    Decoders write through a Sink and nowhere else: this is the one place
    where host mutation reaches into calculus evaluation.
    """

    __slots__ = ("_emit",)

    def __init__(self, target: NativeSink):
        if callable(target):
            self._emit: Callable[[Any], Any] = target
        elif hasattr(target, "append"):
            self._emit = target.append
        else:
            raise ExpressionTypeError(f"Cannot write decoded values to {target!r}")

    def emit(self, value: Any) -> None:
        self._emit(value)

    @classmethod
    def collecting(cls) -> tuple[Sink, list]:
        """A Sink that appends to a fresh list, paired with that list."""
        collected: list = []
        return cls(collected.append), collected
