"""
Tests for in-flight assist request coordination.
"""

import asyncio

import pytest

from sales_agent.assist.coordinator import AssistCoordinator, AssistKind


class _GatedRequest:
    """Request factory that blocks until released and counts calls."""

    def __init__(self, result: str = 'draft'):
        self.result = result
        self.calls = 0
        self.release = asyncio.Event()

    async def __call__(self) -> str:
        self.calls += 1
        await self.release.wait()
        return self.result


class TestDeduplication:
    @pytest.mark.asyncio
    async def test_duplicate_trigger_joins_running_request(self):
        coordinator = AssistCoordinator()
        request = _GatedRequest()

        first = asyncio.create_task(coordinator.run('1', AssistKind.REPLY, request))
        second = asyncio.create_task(coordinator.run('1', AssistKind.REPLY, request))
        await asyncio.sleep(0)

        assert coordinator.is_busy('1', AssistKind.REPLY)
        request.release.set()

        assert await first == 'draft'
        assert await second == 'draft'
        assert request.calls == 1
        assert not coordinator.is_busy('1')

    @pytest.mark.asyncio
    async def test_kinds_and_customers_are_independent(self):
        coordinator = AssistCoordinator()
        reply = _GatedRequest('reply')
        summary = _GatedRequest('summary')
        other = _GatedRequest('other')

        tasks = [
            asyncio.create_task(coordinator.run('1', AssistKind.REPLY, reply)),
            asyncio.create_task(coordinator.run('1', AssistKind.SUMMARY, summary)),
            asyncio.create_task(coordinator.run('2', AssistKind.REPLY, other)),
        ]
        await asyncio.sleep(0)

        assert coordinator.is_busy('1', AssistKind.REPLY)
        assert coordinator.is_busy('1', AssistKind.SUMMARY)
        assert not coordinator.is_busy('1', AssistKind.CLASSIFY)
        assert coordinator.is_busy('2')

        for request in (reply, summary, other):
            request.release.set()

        assert await asyncio.gather(*tasks) == ['reply', 'summary', 'other']
        assert (reply.calls, summary.calls, other.calls) == (1, 1, 1)

    @pytest.mark.asyncio
    async def test_new_request_after_completion(self):
        coordinator = AssistCoordinator()
        request = _GatedRequest()
        request.release.set()

        await coordinator.run('1', AssistKind.CLASSIFY, request)
        await coordinator.run('1', AssistKind.CLASSIFY, request)

        assert request.calls == 2


class TestCancellation:
    @pytest.mark.asyncio
    async def test_cancel_customer_discards_result(self):
        coordinator = AssistCoordinator()
        request = _GatedRequest()

        waiter = asyncio.create_task(coordinator.run('1', AssistKind.SUMMARY, request))
        await asyncio.sleep(0)

        assert coordinator.cancel_customer('1') == 1
        assert await waiter is None
        assert not coordinator.is_busy('1')

    @pytest.mark.asyncio
    async def test_cancel_leaves_other_customers_running(self):
        coordinator = AssistCoordinator()
        first = _GatedRequest('one')
        second = _GatedRequest('two')

        waiter_one = asyncio.create_task(coordinator.run('1', AssistKind.REPLY, first))
        waiter_two = asyncio.create_task(coordinator.run('2', AssistKind.REPLY, second))
        await asyncio.sleep(0)

        coordinator.cancel_customer('1')
        second.release.set()

        assert await waiter_one is None
        assert await waiter_two == 'two'

    @pytest.mark.asyncio
    async def test_abandoned_waiter_does_not_cancel_shared_request(self):
        coordinator = AssistCoordinator()
        request = _GatedRequest()

        abandoned = asyncio.create_task(coordinator.run('1', AssistKind.REPLY, request))
        kept = asyncio.create_task(coordinator.run('1', AssistKind.REPLY, request))
        await asyncio.sleep(0)

        abandoned.cancel()
        with pytest.raises(asyncio.CancelledError):
            await abandoned

        request.release.set()
        assert await kept == 'draft'

    @pytest.mark.asyncio
    async def test_cancel_all(self):
        coordinator = AssistCoordinator()
        waiters = [
            asyncio.create_task(coordinator.run(cid, AssistKind.REPLY, _GatedRequest()))
            for cid in ('1', '2', '3')
        ]
        await asyncio.sleep(0)

        assert coordinator.cancel_all() == 3
        assert await asyncio.gather(*waiters) == [None, None, None]

    def test_cancel_with_nothing_in_flight(self):
        assert AssistCoordinator().cancel_customer('1') == 0
