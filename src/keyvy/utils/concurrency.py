"""Order-preserving async map with an optional concurrency bound."""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable
from operator import itemgetter
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def _resolve(item: Any) -> Any:
    if inspect.isawaitable(item):
        return await item
    return item


async def _gather_or_cancel(tasks: list["asyncio.Future[Any]"]) -> list[Any]:
    """Gather tasks, cancelling the survivors once any of them fails."""
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def concurrent_map(
    items: Iterable[T | Awaitable[T]],
    func: Callable[[T, int], Awaitable[R]],
    *,
    concurrency: int | None = None,
) -> list[R]:
    """Apply an async transform to every item, keeping input order.

    Items may be plain values or awaitables; each one is awaited before
    ``func(item, index)`` runs on it.

    Without a positive ``concurrency`` every transform starts at once.
    With ``concurrency=N``, ``min(N, len(items))`` workers pull
    ``(index, item)`` pairs from one shared cursor and process them one
    at a time.

    On the first failure no further items are dispatched, transforms
    still in flight are cancelled, and the failure is re-raised.

    Args:
        items: Values or awaitables to transform.
        func: Async transform called with the resolved item and its index.
        concurrency: Maximum number of transforms in flight.

    Returns:
        The transform results, ordered like ``items``.
    """
    materialized = list(items)
    if not materialized:
        return []

    if not concurrency or concurrency < 0:

        async def run(item: T | Awaitable[T], index: int) -> R:
            return await func(await _resolve(item), index)

        return await _gather_or_cancel(
            [asyncio.ensure_future(run(item, idx)) for idx, item in enumerate(materialized)]
        )

    cursor = enumerate(materialized)
    results: list[tuple[int, R]] = []
    failed = False

    async def worker() -> None:
        nonlocal failed
        while not failed:
            try:
                index, item = next(cursor)
            except StopIteration:
                return
            try:
                result = await func(await _resolve(item), index)
            except BaseException:
                failed = True
                raise
            results.append((index, result))

    workers = min(concurrency, len(materialized))
    await _gather_or_cancel([asyncio.ensure_future(worker()) for _ in range(workers)])

    results.sort(key=itemgetter(0))
    return [result for _, result in results]
