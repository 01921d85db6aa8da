"""Suspension in one request must not hold up others sharing the event loop."""
from __future__ import annotations

import asyncio
import time

import pytest

from consumer.app.application.processing_service import ProcessingService
from consumer.app.domain.models import Message as ConsumerMessage
from consumer.app.domain.simulated_work import SimulatedDelayProcessor
from producer.app.domain.models import ProduceRequest
from producer.app.infrastructure.messaging.inmemory.in_memory_broker import InMemoryBrokerClient
from producer.app.services.dispatch_messages import dispatch_messages
from tests.conftest import FakeBroker


@pytest.mark.asyncio
async def test_concurrent_consumer_invocations_overlap():
    service = ProcessingService(SimulatedDelayProcessor(0.2))

    start = time.monotonic()
    records = await asyncio.gather(
        *(service.process(ConsumerMessage(text=f"m{i}")) for i in range(5))
    )
    elapsed = time.monotonic() - start

    assert [r.payload.text for r in records] == ["m0", "m1", "m2", "m3", "m4"]
    assert all(r.duration_seconds >= 0.19 for r in records)
    # Serial execution would take about 1s.
    assert elapsed < 0.6


@pytest.mark.asyncio
async def test_concurrent_dispatch_loops_overlap():
    first, second = FakeBroker(), FakeBroker()
    request = ProduceRequest(count=3, interval_milliseconds=100)

    start = time.monotonic()
    outcomes = await asyncio.gather(
        dispatch_messages(request, first),
        dispatch_messages(request, second),
    )
    elapsed = time.monotonic() - start

    assert all(o.success for o in outcomes)
    assert len(first.calls) == 3
    assert len(second.calls) == 3
    # Each loop waits ~0.2s; run back to back they would take ~0.4s.
    assert elapsed < 0.35


@pytest.mark.asyncio
async def test_dispatch_loops_share_one_broker_without_interference():
    broker = InMemoryBrokerClient()

    outcomes = await asyncio.gather(
        dispatch_messages(ProduceRequest(count=4, interval_milliseconds=10, text="a"), broker),
        dispatch_messages(ProduceRequest(count=2, interval_milliseconds=10, text="b"), broker),
    )

    assert [o.published for o in outcomes] == [4, 2]
    texts = [m.text for m in broker.messages]
    assert texts.count("a") == 4
    assert texts.count("b") == 2

