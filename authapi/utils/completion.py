"""Defines how operations hand their result back to the caller.

Every public operation either returns an awaitable for the caller to await,
or, when a callback is supplied, schedules the request on the running event
loop and later calls ``callback(error, result)`` exactly once.
"""

import asyncio
import functools
import logging
from typing import Any, Callable, Coroutine, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[BaseException | None, Any], None]

# Holds strong references so scheduled requests are not garbage collected.
_pending: set[asyncio.Task] = set()


def deliver(request: Coroutine[Any, Any, T], callback: Callback | None = None) -> Coroutine[Any, Any, T] | None:
    if callback is None:
        return request

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        request.close()
        raise RuntimeError("A running event loop is required when passing a callback") from None

    task = loop.create_task(request)
    _pending.add(task)
    task.add_done_callback(functools.partial(_complete, callback))
    return None


def _complete(callback: Callback, task: asyncio.Task) -> None:
    _pending.discard(task)
    if task.cancelled():
        callback(asyncio.CancelledError(), None)
        return
    if (error := task.exception()) is not None:
        logger.debug("Request failed, passing %r to callback", error)
        callback(error, None)
    else:
        callback(None, task.result())
