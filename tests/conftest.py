from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

import pytest

from rdispatch import Middleware, MiddlewareAPI, Next, Store, ensure_action


class CounterStore(Store[int, Any]):
    def __init__(self) -> None:
        self.state = 0
        self.received: list[Any] = []

    def dispatch(self, action: Any) -> Any:
        ensure_action(action)

        self.received.append(action)

        action_type = (
            action["type"] if isinstance(action, Mapping) else action.type
        )

        if action_type == "INCREMENT":
            self.state += 1

        return action

    def get_state(self) -> int:
        return self.state


def recording(events: list[str], name: str) -> Middleware:
    def instantiate(api: MiddlewareAPI) -> Callable[[Next], Callable]:
        def wrap(next: Next) -> Callable[[Any], Any]:
            def handle(action: Any) -> Any:
                events.append(f"pre:{name}")
                result = next(action)
                events.append(f"post:{name}")

                return result

            return handle

        return wrap

    return instantiate


@pytest.fixture
def store() -> CounterStore:
    return CounterStore()


@pytest.fixture
def events() -> list[str]:
    return []
