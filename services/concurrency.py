"""
Run independent blocking store lookups side by side.
"""

from typing import Any, Callable, List, Optional

import anyio
import anyio.to_thread


async def run_concurrently(*calls: Callable[[], Any]) -> List[Any]:
    """
    Launch every call in a worker thread and wait for all of them.

    Results come back in call order. The first failure cancels the group and
    is re-raised as-is; calls already running in a thread finish but their
    results are dropped.
    """
    results: List[Any] = [None] * len(calls)
    failure: Optional[BaseException] = None

    async with anyio.create_task_group() as tg:

        async def _run(index: int, call: Callable[[], Any]) -> None:
            nonlocal failure
            try:
                results[index] = await anyio.to_thread.run_sync(call)
            except Exception as exc:
                if failure is None:
                    failure = exc
                tg.cancel_scope.cancel()

        for i, call in enumerate(calls):
            tg.start_soon(_run, i, call)

    if failure is not None:
        raise failure
    return results
