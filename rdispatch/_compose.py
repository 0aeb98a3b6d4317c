from __future__ import annotations

from functools import reduce
from typing import Any, Callable


__all__ = (
    "compose",
)


def _identity(value: Any) -> Any:
    return value


def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    if not funcs:
        return _identity

    if len(funcs) == 1:
        return funcs[0]

    return reduce(
        lambda outer, inner: lambda value: outer(inner(value)),
        funcs
    )
