from typing import Any, Generic, TypeVar


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Store",
)


class Store(Generic[S, A]):
    def dispatch(self, action: A) -> Any:
        raise NotImplementedError

    def get_state(self) -> S:
        raise NotImplementedError
