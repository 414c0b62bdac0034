"""Background dispatch of side effects that follow a committed write."""

import asyncio
from collections.abc import Coroutine
from typing import Any, Optional

import logfire


class CommitSignal:
    """Outcome of the unit of work a request writes through.

    Resolved exactly once: the first ``mark_*`` call wins.
    """

    def __init__(self, committed: Optional[bool] = None) -> None:
        self._outcome = committed
        self._resolved = asyncio.Event()
        if committed is not None:
            self._resolved.set()

    @classmethod
    def already_committed(cls) -> "CommitSignal":
        """Signal for stores without transactions, where every write is final."""
        return cls(committed=True)

    @property
    def resolved(self) -> bool:
        return self._outcome is not None

    def mark_committed(self) -> None:
        self._resolve(True)

    def mark_rolled_back(self) -> None:
        self._resolve(False)

    def _resolve(self, outcome: bool) -> None:
        if self._outcome is None:
            self._outcome = outcome
            self._resolved.set()

    async def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the outcome.

        Returns:
            True once committed; False on rollback or if ``timeout`` expires
        """
        try:
            await asyncio.wait_for(self._resolved.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return bool(self._outcome)


class BackgroundJobs:
    """Tracks fire-and-forget tasks.

    Holds a reference to every running job and logs any job that fails, so
    no task is garbage collected mid-flight or dies silently.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    def __len__(self) -> int:
        return len(self._tasks)

    def spawn(self, name: str, job: Coroutine[Any, Any, Any]) -> asyncio.Task:
        """Schedule ``job`` on the running loop and return its task."""
        task = asyncio.create_task(job, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logfire.warn("Background job cancelled", job=task.get_name())
            return
        error = task.exception()
        if error is not None:
            logfire.error(
                "Background job failed",
                job=task.get_name(),
                error=str(error),
                _exc_info=error,
            )

    async def drain(self) -> None:
        """Wait until every job, including ones spawned meanwhile, is done."""
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def close(self, grace: float = 5.0) -> None:
        """Give running jobs ``grace`` seconds, then cancel the rest."""
        if self._tasks and grace > 0:
            await asyncio.wait(set(self._tasks), timeout=grace)
        remaining = list(self._tasks)
        for task in remaining:
            task.cancel()
        if remaining:
            await asyncio.gather(*remaining, return_exceptions=True)
        logfire.info("Background jobs closed", cancelled=len(remaining))
