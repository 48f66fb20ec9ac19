"""TaskContext: a per-thread, per-task current marker.

This module demonstrates:

1. ``DefaultWireContextNotSetError`` outside any scope.
2. ``run_with_context`` for synchronous work.
3. ``arun_with_context`` keeping concurrent asyncio tasks isolated.
"""

from __future__ import annotations

import asyncio

from defaultwire import DefaultWireContextNotSetError, TaskContext

current_job: TaskContext[str] = TaskContext("current_job")


def describe() -> str:
    return f"running {current_job.get_current()}"


async def adescribe(delay: float) -> str:
    await asyncio.sleep(delay)
    return describe()


async def run_concurrently() -> list[str]:
    return await asyncio.gather(
        current_job.arun_with_context("slow", adescribe, 0.02),
        current_job.arun_with_context("fast", adescribe, 0.0),
    )


def main() -> None:
    try:
        describe()
    except DefaultWireContextNotSetError as error:
        print(f"unset_error={type(error).__name__}")  # => unset_error=DefaultWireContextNotSetError

    print(current_job.run_with_context("import", describe))  # => running import
    print(f"after={current_job.find_current()}")  # => after=None

    print(asyncio.run(run_concurrently()))  # => ['running slow', 'running fast']


if __name__ == "__main__":
    main()
