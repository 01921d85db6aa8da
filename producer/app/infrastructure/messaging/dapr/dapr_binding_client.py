"""Dapr output binding client: POSTs each message to the sidecar's binding endpoint using httpx.

Lifecycle: the httpx.AsyncClient is built once in the factory and shared across
requests. connect() marks the client ready; close() releases the connection pool.
"""
from __future__ import annotations

import time
from typing import Any

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from producer.app.core import SERVICE_NAME
from producer.app.domain.models import Message
from producer.app.ports.message_broker import (
    BrokerTimeoutError,
    BrokerTransportError,
    MessageBrokerClient,
)


def _log(event: str, *, level: str = "INFO", **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).log(level, "")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class MessagePayload(_CamelModel):
    text: str


class BindingRequest(_CamelModel):
    """Body of POST /v1.0/bindings/<name>; the sidecar forwards `data` to the queue."""

    data: MessagePayload

    @classmethod
    def from_message(cls, message: Message) -> "BindingRequest":
        return cls(data=MessagePayload(text=message.text))


class DaprBindingClient(MessageBrokerClient):
    """MessageBrokerClient implementation over the Dapr HTTP bindings API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        base_url: str,
        binding_name: str,
        timeout_seconds: float,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._binding_name = binding_name
        self._timeout = httpx.Timeout(timeout_seconds)
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def binding_url(self) -> str:
        return f"{self._base_url}/v1.0/bindings/{self._binding_name}"

    async def connect(self) -> None:
        self._ready = True
        _log("broker_client_ready", binding_url=self.binding_url)

    async def publish(self, message: Message) -> None:
        if self._client.is_closed:
            raise BrokerTransportError(f"broker client is closed; cannot publish to {self.binding_url}")
        body = BindingRequest.from_message(message).model_dump(by_alias=True)
        start = time.perf_counter()
        try:
            response = await self._client.post(
                self.binding_url,
                json=body,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            raise BrokerTimeoutError(f"timeout while publishing to {self.binding_url}") from exc
        except httpx.HTTPError as exc:
            raise BrokerTransportError(f"publish failed for {self.binding_url}: {exc}") from exc

        if not response.is_success:
            raise BrokerTransportError(
                f"http status {response.status_code} for {self.binding_url}",
                status_code=response.status_code,
            )
        latency_ms = (time.perf_counter() - start) * 1000
        _log(
            "message_publish_ok",
            level="DEBUG",
            status_code=response.status_code,
            latency_ms=round(latency_ms, 2),
        )

    async def ping(self) -> bool:
        """Return True if the sidecar health endpoint answers 2xx; False on any error."""
        if self._client.is_closed:
            return False
        try:
            response = await self._client.get(f"{self._base_url}/v1.0/healthz", timeout=self._timeout)
        except httpx.HTTPError:
            return False
        return response.is_success

    async def close(self) -> None:
        self._ready = False
        await self._client.aclose()
