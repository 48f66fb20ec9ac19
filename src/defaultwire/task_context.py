from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generic, TypeVar

from defaultwire.exceptions import DefaultWireContextNotSetError

T = TypeVar("T")
R = TypeVar("R")

_UNSET: Any = object()


class TaskContext(Generic[T]):
    """Task/thread-local "current in-flight marker" scoped around a unit of work.

    The marker lives in a ``ContextVar``: it is only visible to the thread or
    asyncio task that set it (and to tasks spawned from it afterwards), and
    every scope restores the previous marker on exit, whether the work returns
    or raises.

    Examples:
        .. code-block:: python

            current_request: TaskContext[Request] = TaskContext("current_request")


            def handle() -> str:
                return current_request.get_current().path


            current_request.run_with_context(request, handle)

    """

    __slots__ = ("_current_var",)

    def __init__(self, name: str = "defaultwire_task_context") -> None:
        self._current_var: ContextVar[T] = ContextVar(name, default=_UNSET)

    @property
    def name(self) -> str:
        return self._current_var.name

    def get_current(self) -> T:
        """Return the active marker or raise when no scope is active."""
        marker = self._current_var.get()
        if marker is _UNSET:
            msg = (
                f"No marker is set for task context '{self.name}'. "
                "Run the work through run_with_context() or use()."
            )
            raise DefaultWireContextNotSetError(msg)
        return marker

    def find_current(self) -> T | None:
        """Return the active marker, or None when no scope is active."""
        marker = self._current_var.get()
        return None if marker is _UNSET else marker

    @contextmanager
    def use(self, marker: T) -> Iterator[T]:
        """Make ``marker`` current for the duration of the ``with`` block."""
        token = self._current_var.set(marker)
        try:
            yield marker
        finally:
            self._current_var.reset(token)

    def run_with_context(self, marker: T, task: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """Run ``task`` with ``marker`` as the current marker and return its result."""
        with self.use(marker):
            return task(*args, **kwargs)

    async def arun_with_context(
        self,
        marker: T,
        task: Callable[..., Awaitable[R]],
        *args: Any,
        **kwargs: Any,
    ) -> R:
        """Await ``task`` with ``marker`` as the current marker and return its result."""
        with self.use(marker):
            return await task(*args, **kwargs)

    def bind(self, marker: T, task: Callable[[], R]) -> Callable[[], R]:
        """Return a zero-argument callable that runs ``task`` under ``marker``.

        Useful for handing work to an executor or event loop that runs it on
        another thread: the marker is set there, not at bind time.
        """

        @functools.wraps(task)
        def bound() -> R:
            return self.run_with_context(marker, task)

        return bound

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


__all__ = ["TaskContext"]
