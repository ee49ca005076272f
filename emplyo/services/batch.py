"""
All-or-nothing concurrent execution.

``gather_all_or_nothing`` runs every awaitable concurrently and returns a
``BatchOutcome`` that holds either every result (in input order) or the
first failure. On failure the still-running members are cancelled.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Generic, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BatchOutcome(Generic[T]):
    results: List[T] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[T]:
        """Return the results or raise the failure."""
        if self.error is not None:
            raise self.error
        return self.results


async def gather_all_or_nothing(awaitables: Iterable[Awaitable[T]]) -> BatchOutcome[T]:
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return BatchOutcome(results=[])

    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)

    # Retrieve every finished exception so none is reported as unhandled
    failures = [task for task in tasks if task in done and task.exception() is not None]
    if not failures:
        return BatchOutcome(results=[task.result() for task in tasks])

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)

    error = failures[0].exception()
    logger.warning(
        f"Batch aborted: {len(failures)} of {len(tasks)} failed, "
        f"{len(pending)} cancelled ({type(error).__name__}: {error})"
    )
    return BatchOutcome(error=error)
