from __future__ import annotations
import logging
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from lambda_expression.config import get_recursion_limit

logger = logging.getLogger(__name__)

# sys.setrecursionlimit is process-global, so the raised limit is shared by
# every decode in flight. It is restored only when the last one exits.
_lock = threading.Lock()
_active = 0
_saved_limit: Optional[int] = None


@contextmanager
def recursion_limit(limit: Optional[int] = None) -> Iterator[int]:
    """Run the body with the recursion limit raised to at least `limit`.

    Forcing a chain of deferred applications recurses once per pending
    application, so deep numerals need far more frames than the default.
    The limit is never lowered while any caller is inside the block; the
    value found by the first caller is restored when the last one leaves.
    Yields the limit in force inside the block.
    """
    global _active, _saved_limit
    wanted = get_recursion_limit() if limit is None else limit
    with _lock:
        current = sys.getrecursionlimit()
        if _active == 0:
            _saved_limit = current
        _active += 1
        if wanted > current:
            logger.debug("raising recursion limit %d -> %d", current, wanted)
            sys.setrecursionlimit(wanted)
            current = wanted
    try:
        yield current
    finally:
        with _lock:
            _active -= 1
            if _active == 0 and _saved_limit is not None:
                if sys.getrecursionlimit() != _saved_limit:
                    logger.debug("restoring recursion limit %d", _saved_limit)
                    sys.setrecursionlimit(_saved_limit)
                _saved_limit = None
