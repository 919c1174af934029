"""Bounded job runner over a growing work queue.

Jobs may push new work onto the queue while the run is in progress; the
run only finishes once the queue is empty and every started job is done.
"""

import asyncio
from collections import deque
from typing import Any, Awaitable, Callable, Set

Job = Callable[[Any, int], Awaitable[None]]


async def run_jobs(queue: deque, job: Job, concurrency: int) -> None:
    """Run ``job(item, index)`` for every item popped from ``queue``.

    Items are started in queue order and numbered from 0 in that order.
    At most ``concurrency`` jobs run at any moment. Items appended to
    ``queue`` by a running job are picked up by the same run.

    Args:
        queue: Work items, consumed from the left
        job: Coroutine function called with (item, index)
        concurrency: Maximum number of jobs running at once

    Raises:
        ValueError: If concurrency is less than 1
        Exception: The first exception raised by a job; the remaining
            jobs are cancelled
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    running: Set[asyncio.Task] = set()
    started = 0

    try:
        while queue or running:
            while queue and len(running) < concurrency:
                item = queue.popleft()
                running.add(asyncio.ensure_future(job(item, started)))
                started += 1

            done, running = await asyncio.wait(running, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                # Re-raise the first failure
                task.result()
    finally:
        for task in running:
            task.cancel()
        if running:
            await asyncio.gather(*running, return_exceptions=True)
