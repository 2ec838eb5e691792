from __future__ import annotations
from functools import wraps
from typing import Callable, Iterable, List, TypeVar

from more_itertools import unique_everseen as _unique_everseen

A = TypeVar("A")
B = TypeVar("B")

def try_or(default: B) -> Callable[[Callable[[A], B]], Callable[[A], B]]:
    def _wrap(fn: Callable[[A], B]) -> Callable[[A], B]:
        @wraps(fn)
        def _inner(x: A) -> B:
            try:
                return fn(x)
            except (TypeError, ValueError, OverflowError):
                return default
        return _inner
    return _wrap

def unique_stable(seq: Iterable[A]) -> List[A]:
    # Delegate to more-itertools; preserves first-seen order
    return list(_unique_everseen(seq))
