from __future__ import annotations

import asyncio
import inspect
import logging

from contextvars import ContextVar
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel
from redis import Redis
from redis.asyncio import Redis as AsyncRedis
from redis.asyncio.client import PubSub

from ._middleware import Dispatch, Middleware, MiddlewareAPI, Next, middleware


__all__ = (
    "create_broadcast_middleware",
    "relay_actions",
)


A = TypeVar("A", bound=BaseModel)


logger = logging.getLogger(__name__)

_relaying: ContextVar[bool] = ContextVar("rdispatch_relaying", default=False)


def create_broadcast_middleware(
    client: Union[Redis, AsyncRedis],
    channel: str
) -> Middleware:
    """Publish every dispatched model action on ``channel``.

    With a ``redis.asyncio`` client the publish is scheduled as a task on the
    running loop, so dispatch never blocks on Redis.
    """

    pending: set[asyncio.Task] = set()

    def published(task: asyncio.Task) -> None:
        pending.discard(task)

        if not task.cancelled() and task.exception() is not None:
            logger.error(
                "Failed to publish action on %s",
                channel,
                exc_info=task.exception()
            )

    @middleware
    def broadcast(api: MiddlewareAPI, next: Next, action: Any) -> Any:
        result = next(action)

        if not isinstance(action, BaseModel) or _relaying.get():
            return result

        publish = client.publish(channel, action.model_dump_json())

        if inspect.isawaitable(publish):
            task = asyncio.get_running_loop().create_task(publish)
            pending.add(task)
            task.add_done_callback(published)

        return result

    return broadcast


async def relay_actions(
    pubsub: PubSub,
    action_type: Type[A],
    dispatch: Dispatch
) -> None:
    async for message in pubsub.listen():
        if message["type"] != "message":
            continue

        token = _relaying.set(True)

        try:
            action = action_type.model_validate_json(message["data"])

            logger.debug("Relaying %r", action)

            dispatch(action)
        except Exception:
            logger.exception("Failed to relay %r", message["data"])
        finally:
            _relaying.reset(token)
