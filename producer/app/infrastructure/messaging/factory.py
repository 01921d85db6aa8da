"""Broker client factory: selects implementation from config."""
from __future__ import annotations

import httpx

from producer.app.config.settings import Settings
from producer.app.ports.message_broker import MessageBrokerClient
from producer.app.infrastructure.messaging.dapr.dapr_binding_client import DaprBindingClient
from producer.app.infrastructure.messaging.inmemory.in_memory_broker import InMemoryBrokerClient


def create_broker_client(settings: Settings) -> MessageBrokerClient:
    backend = settings.broker_backend.strip().lower()

    if backend == "dapr":
        return DaprBindingClient(
            httpx.AsyncClient(),
            base_url=settings.dapr_base_url,
            binding_name=settings.binding_name,
            timeout_seconds=settings.publish_timeout_seconds,
        )

    if backend == "inmemory":
        return InMemoryBrokerClient()

    raise ValueError(f"Unsupported broker backend: {backend}")
