from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, TypeAlias


__all__ = (
    "Dispatch",
    "GetState",
    "Middleware",
    "MiddlewareAPI",
    "Next",

    "middleware",
)


Dispatch: TypeAlias = Callable[[Any], Any]
GetState: TypeAlias = Callable[[], Any]
Next: TypeAlias = Dispatch


@dataclass(frozen=True)
class MiddlewareAPI:
    dispatch: Dispatch
    get_state: GetState


Middleware: TypeAlias = Callable[[MiddlewareAPI], Callable[[Next], Dispatch]]
FlatMiddleware: TypeAlias = Callable[[MiddlewareAPI, Next, Any], Any]


def middleware(func: FlatMiddleware) -> Middleware:
    """Adapt ``func(api, next, action)`` to the curried middleware form."""

    @wraps(func)
    def instantiate(api: MiddlewareAPI) -> Callable[[Next], Dispatch]:
        def wrap(next: Next) -> Dispatch:
            def handle(action: Any) -> Any:
                return func(api, next, action)

            return handle

        return wrap

    return instantiate
