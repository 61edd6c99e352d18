"""
In-flight coordination of assist requests.

Rules:
- At most one outstanding request per (customer, kind). A second trigger
  while one is running joins the running request instead of starting a new
  model call.
- Navigating away from a customer cancels that customer's outstanding
  requests; their waiters receive None and must discard the result.
- is_busy() exposes the busy flag used to disable the triggering control.
"""

import asyncio
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import TypeVar

from ..logging import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class AssistKind(str, Enum):
    """Assist operation kinds tracked independently per customer."""

    REPLY = 'reply'
    CLASSIFY = 'classify'
    SUMMARY = 'summary'


class AssistCoordinator:
    """Tracks outstanding assist tasks keyed by (customer_id, kind)."""

    def __init__(self):
        self._in_flight: dict[tuple[str, AssistKind], asyncio.Future] = {}

    def is_busy(self, customer_id: str, kind: AssistKind | None = None) -> bool:
        """True if a request for the customer (and kind, if given) is running."""
        for (cid, k), task in self._in_flight.items():
            if cid != customer_id or task.done():
                continue
            if kind is None or k == kind:
                return True
        return False

    async def run(
        self,
        customer_id: str,
        kind: AssistKind,
        factory: Callable[[], Awaitable[T]],
    ) -> T | None:
        """
        Run factory() unless the same request is already in flight.

        Args:
            customer_id: Conversation the request belongs to
            kind: Operation kind
            factory: Zero-argument callable producing the request awaitable

        Returns:
            The request result, or None if it was cancelled by navigation
        """
        key = (customer_id, kind)
        task = self._in_flight.get(key)
        if task is None or task.done():
            task = asyncio.ensure_future(factory())
            self._in_flight[key] = task
            task.add_done_callback(lambda t, key=key: self._forget(key, t))
            logger.debug('assist.request.started', customer_id=customer_id, kind=kind.value)
        else:
            logger.info('assist.request.joined', customer_id=customer_id, kind=kind.value)

        try:
            # shield: one waiter going away must not cancel the shared request
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if task.cancelled():
                logger.info('assist.request.discarded', customer_id=customer_id, kind=kind.value)
                return None
            raise

    def cancel_customer(self, customer_id: str) -> int:
        """
        Cancel every outstanding request for a customer.

        Returns:
            Number of requests cancelled
        """
        cancelled = 0
        for (cid, kind), task in list(self._in_flight.items()):
            if cid == customer_id and not task.done():
                task.cancel()
                cancelled += 1
                logger.info('assist.request.cancelled', customer_id=cid, kind=kind.value)
        return cancelled

    def cancel_all(self) -> int:
        """Cancel every outstanding request (e.g. on logout)."""
        customer_ids = {cid for cid, _ in self._in_flight}
        return sum(self.cancel_customer(cid) for cid in customer_ids)

    def _forget(self, key: tuple[str, AssistKind], task: asyncio.Future) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]
