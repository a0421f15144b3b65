"""
Concurrency helpers.
"""

import asyncio
from typing import Any, Awaitable, Iterable, List


async def gather_or_cancel(aws: Iterable[Awaitable[Any]]) -> List[Any]:
    """Run awaitables concurrently and return their results in order.

    Unlike a bare ``asyncio.gather``, when one of them fails the others are
    cancelled and awaited before the error is raised, so no request keeps
    running after the caller has given up.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
