from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ._errors import InvalidActionError


__all__ = (
    "Action",

    "ensure_action",
    "is_action",
)


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    payload: Any = None
    error: bool = False
    meta: Optional[dict[str, Any]] = None


def _action_type(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return getattr(value, "type", None)

    if isinstance(value, Mapping):
        return value.get("type")

    return None


def is_action(value: Any) -> bool:
    return _action_type(value) is not None


def ensure_action(value: Any) -> None:
    if not isinstance(value, (BaseModel, Mapping)):
        raise InvalidActionError(
            "Actions must be records. Instead, the actual type was: "
            f"'{type(value).__name__}'. You may need to add middleware to "
            "your store setup to handle dispatching other values, such as "
            "'rdispatch.middleware.thunk' to handle dispatching functions."
        )

    if _action_type(value) is None:
        raise InvalidActionError(
            'Actions may not have an undefined "type" property. '
            "You may have misspelled an action type string constant."
        )
