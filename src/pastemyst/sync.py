"""
Blocking wrappers for the async API functions.
"""

import asyncio
import threading
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar, cast

from .core.sync import (
    detect_event_loop_state,
    run_in_thread_pool,
)

T = TypeVar("T")

_thread_local = threading.local()


def get_or_create_event_loop() -> asyncio.AbstractEventLoop:
    """
    Return this thread's private event loop, creating it if needed.

    The loop is kept open and reused for the life of the thread; a loop that
    was closed elsewhere is replaced on the next call.
    """
    loop = getattr(_thread_local, "loop", None)
    if loop is None or loop.is_closed():
        loop = asyncio.new_event_loop()
        _thread_local.loop = loop
    return cast(asyncio.AbstractEventLoop, loop)


def sync_wrapper(async_func: Callable[..., Awaitable[T]]) -> Callable[..., T]:
    """
    Create the blocking version of a coroutine function.

    The calling thread is occupied until the coroutine finishes. Inside a
    running event loop the coroutine runs on a worker thread instead, so the
    loop is never re-entered. Exceptions propagate unchanged.
    """

    @wraps(async_func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        if detect_event_loop_state() == "running":
            return run_in_thread_pool(async_func(*args, **kwargs))

        loop = get_or_create_event_loop()
        return loop.run_until_complete(async_func(*args, **kwargs))

    return wrapper


class SyncClientMixin:
    """Mixin providing blocking versions of the async client methods."""

    def get_paste_sync(self, paste_id: str) -> Any:
        """Synchronous version of get_paste."""
        return sync_wrapper(getattr(self, "get_paste"))(paste_id)

    def create_paste_sync(self, payload: Any) -> Any:
        """Synchronous version of create_paste."""
        return sync_wrapper(getattr(self, "create_paste"))(payload)

    def edit_paste_sync(self, payload: Any, paste_id: str) -> Any:
        """Synchronous version of edit_paste."""
        return sync_wrapper(getattr(self, "edit_paste"))(payload, paste_id)

    def delete_paste_sync(self, paste_id: str) -> int:
        """Synchronous version of delete_paste."""
        return sync_wrapper(getattr(self, "delete_paste"))(paste_id)

    def get_user_sync(self, username: str) -> Any:
        """Synchronous version of get_user."""
        return sync_wrapper(getattr(self, "get_user"))(username)

    def user_exists_sync(self, username: str) -> bool:
        """Synchronous version of user_exists."""
        return sync_wrapper(getattr(self, "user_exists"))(username)

    def get_language_by_name_sync(self, name: str) -> Any:
        """Synchronous version of get_language_by_name."""
        return sync_wrapper(getattr(self, "get_language_by_name"))(name)

    def get_language_by_extension_sync(self, extension: str) -> Any:
        """Synchronous version of get_language_by_extension."""
        return sync_wrapper(getattr(self, "get_language_by_extension"))(extension)

    def expires_into_unix_sync(self, created_at: int, expires_in: str) -> int:
        """Synchronous version of expires_into_unix."""
        return sync_wrapper(getattr(self, "expires_into_unix"))(created_at, expires_in)
