from __future__ import annotations

import asyncio
import inspect
import logging

from numbers import Real
from typing import Any, Callable, Optional

from ._action import Action
from ._middleware import Dispatch, Middleware, MiddlewareAPI, Next, middleware


__all__ = (
    "CrashReport",

    "awaitable",
    "create_crash_reporter",
    "create_logger",
    "create_thunk_middleware",
    "passthrough",
    "thunk",
    "timeout_scheduler",
)


logger = logging.getLogger(__name__)


CrashReport = Callable[[Exception, Any, Any], None]


@middleware
def passthrough(api: MiddlewareAPI, next: Next, action: Any) -> Any:
    return next(action)


def create_logger(
    log: Optional[logging.Logger] = None,
    level: int = logging.INFO
) -> Middleware:
    target = log or logger

    @middleware
    def log_action(api: MiddlewareAPI, next: Next, action: Any) -> Any:
        target.log(
            level,
            "dispatching %r with state %r",
            action,
            api.get_state()
        )
        result = next(action)
        target.log(level, "next state %r", api.get_state())

        return result

    return log_action


def _log_crash(exc: Exception, action: Any, state: Any) -> None:
    logger.exception(
        "Caught an exception while dispatching %r",
        action,
        exc_info=exc
    )


def create_crash_reporter(report: Optional[CrashReport] = None) -> Middleware:
    """Report exceptions raised further down the chain, then re-raise them.

    ``report`` receives the exception, the action being dispatched and the
    state at the time of the failure.
    """

    on_crash = report or _log_crash

    @middleware
    def crash_reporter(api: MiddlewareAPI, next: Next, action: Any) -> Any:
        try:
            return next(action)
        except Exception as exc:
            on_crash(exc, action, api.get_state())
            raise

    return crash_reporter


def create_thunk_middleware(extra_argument: Any = None) -> Middleware:
    """Let callables be dispatched in place of actions.

    A callable action is invoked as ``action(dispatch, get_state,
    extra_argument)`` and its return value becomes the result of the dispatch.
    The rest of the chain is skipped for it.
    """

    @middleware
    def thunk_middleware(api: MiddlewareAPI, next: Next, action: Any) -> Any:
        if callable(action):
            return action(api.dispatch, api.get_state, extra_argument)

        return next(action)

    return thunk_middleware


thunk = create_thunk_middleware()


def _delay(action: Any) -> Optional[float]:
    if not isinstance(action, Action) or not action.meta:
        return None

    delay = action.meta.get("delay")

    if isinstance(delay, bool) or not isinstance(delay, Real):
        return None

    return float(delay)


@middleware
def timeout_scheduler(api: MiddlewareAPI, next: Next, action: Any) -> Any:
    delay = _delay(action)

    if delay is None:
        return next(action)

    handle = asyncio.get_running_loop().call_later(delay, next, action)

    return handle.cancel


def awaitable(api: MiddlewareAPI) -> Callable[[Next], Dispatch]:
    async def resolve(action: Any) -> Any:
        return api.dispatch(await action)

    def wrap(next: Next) -> Dispatch:
        def handle(action: Any) -> Any:
            if not inspect.isawaitable(action):
                return next(action)

            return asyncio.get_running_loop().create_task(resolve(action))

        return handle

    return wrap
