from ._action import Action, ensure_action, is_action
from ._apply import apply_middleware, build_dispatch
from ._compose import compose
from ._errors import ConstructionError, DispatchError, InvalidActionError
from ._middleware import (
    Dispatch,
    GetState,
    Middleware,
    MiddlewareAPI,
    Next,
    middleware
)
from ._store import Store


__all__ = (
    "Action",
    "ConstructionError",
    "Dispatch",
    "DispatchError",
    "GetState",
    "InvalidActionError",
    "Middleware",
    "MiddlewareAPI",
    "Next",
    "Store",

    "apply_middleware",
    "build_dispatch",
    "compose",
    "ensure_action",
    "is_action",
    "middleware"
)
