from __future__ import annotations

import logging

from typing import Any, Callable, Sequence

from ._compose import compose
from ._errors import ConstructionError
from ._middleware import Dispatch, GetState, Middleware, MiddlewareAPI
from ._store import Store


__all__ = (
    "apply_middleware",
    "build_dispatch",
)


logger = logging.getLogger(__name__)


def _dispatch_during_construction(action: Any) -> Any:
    raise ConstructionError(
        "Dispatching while constructing your middleware is not allowed. "
        "Other middleware would not be applied to this dispatch."
    )


class _DispatchCell:
    _target: Dispatch

    def __init__(self) -> None:
        self._target = _dispatch_during_construction

    def bind(self, target: Dispatch) -> None:
        self._target = target

    def __call__(self, action: Any) -> Any:
        return self._target(action)


def build_dispatch(
    middleware: Sequence[Middleware],
    get_state: GetState,
    dispatch: Dispatch
) -> Dispatch:
    cell = _DispatchCell()
    api = MiddlewareAPI(
        dispatch=cell,
        get_state=get_state
    )

    chain = [item(api) for item in middleware]

    enhanced_dispatch = compose(*chain)(dispatch)
    cell.bind(enhanced_dispatch)

    logger.debug("Built dispatch chain with %d middleware", len(chain))

    return enhanced_dispatch


def apply_middleware(
    *middleware: Middleware
) -> Callable[[Store[Any, Any]], Store[Any, Any]]:
    def apply(original_store: Store[Any, Any]) -> Store[Any, Any]:
        class EnhancedStore(Store[Any, Any]):
            def __init__(self, dispatch: Dispatch) -> None:
                self._dispatch = dispatch

            def dispatch(self, action: Any) -> Any:
                return self._dispatch(action)

            def get_state(self) -> Any:
                return original_store.get_state()

            def __getattr__(self, name: str) -> Any:
                return getattr(original_store, name)

        return EnhancedStore(
            build_dispatch(
                middleware,
                original_store.get_state,
                original_store.dispatch
            )
        )

    return apply
