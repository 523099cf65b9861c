"""Drive a strategy to produce a snapshot."""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

from ..format.Format import Format
from ..SnapshotError import SnapshotError
from .Deferred import Deferred
from .ProductionTimeoutError import ProductionTimeoutError

if TYPE_CHECKING:
    from ..strategy.Strategy import Strategy


def produce(subject: Any, strategy: Strategy, timeout: float) -> Format:
    """Turn a subject into a snapshot using a strategy.

    Strategies may answer immediately with a ``Format`` or hand back a
    ``Deferred``, a ``concurrent.futures.Future`` or an awaitable; deferred
    results are waited for at most ``timeout`` seconds.

    Args:
        subject: Value being snapshotted
        strategy: Strategy providing the snapshot function
        timeout: Seconds to wait for deferred production

    Returns:
        The produced Format

    Raises:
        ProductionTimeoutError: If deferred production does not finish in time
        TypeError: If the strategy produces something other than a matching Format
    """
    result = strategy.snapshot(subject)

    if isinstance(result, Format):
        value = result
    elif isinstance(result, Deferred):
        value = result.wait(timeout)
    elif isinstance(result, concurrent.futures.Future):
        try:
            value = result.result(timeout=timeout)
        except concurrent.futures.TimeoutError as exc:
            raise ProductionTimeoutError(timeout) from exc
    elif inspect.isawaitable(result):
        value = _await(result, timeout)
    else:
        raise TypeError(
            f"strategy {strategy.name!r} returned {type(result).__name__}; "
            "expected a Format, Deferred, Future or awaitable"
        )

    if not isinstance(value, Format):
        raise TypeError(f"strategy {strategy.name!r} produced {type(value).__name__}; expected a Format")
    if value.kind is not strategy.kind:
        raise TypeError(
            f"strategy {strategy.name!r} declares {strategy.kind.value} snapshots but produced {value.kind.value}"
        )
    return value


def _await(awaitable: Awaitable[Any], timeout: float) -> Any:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        raise SnapshotError(
            "cannot wait for an awaitable snapshot inside a running event loop; "
            "return a Deferred or Future from the strategy instead"
        )

    async def _run() -> Any:
        return await asyncio.wait_for(awaitable, timeout)

    try:
        return asyncio.run(_run())
    except asyncio.TimeoutError as exc:
        raise ProductionTimeoutError(timeout) from exc
