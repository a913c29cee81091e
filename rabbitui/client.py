"""HTTP access to the RabbitMQ management API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import requests

from rabbitui.models import (
    ExchangeBindings,
    ExchangeInfo,
    MQMessage,
    MQMessageGetBody,
    Overview,
    PayloadPost,
    QueueInfo,
)

_TIMEOUT = 30
# Publishing always authenticates with the broker's stock account.
_PUBLISH_AUTH = ("guest", "guest")


def _encode_vhost(vhost: str) -> str:
    return vhost.replace("/", "%2F")


class ManagementClient(ABC):
    """Data access for the RabbitMQ management API."""

    @abstractmethod
    def get_exchange_overview(self) -> list[ExchangeInfo]: ...

    @abstractmethod
    def get_exchange_bindings(self, exchange: ExchangeInfo) -> list[ExchangeBindings]: ...

    @abstractmethod
    def get_overview(self) -> Overview: ...

    @abstractmethod
    def get_queues_info(self) -> list[QueueInfo]: ...

    @abstractmethod
    def post_queue_payload(self, queue_name: str, vhost: str, payload: str) -> None: ...

    @abstractmethod
    def pop_queue_item(self, queue_name: str, vhost: str) -> MQMessage | None: ...

    @abstractmethod
    def ping(self) -> bool: ...

    @abstractmethod
    def purge_queue(self, queue_name: str, vhost: str) -> None: ...


class Client(ManagementClient):
    """Management client talking HTTP with basic authentication."""

    def __init__(self, addr: str, user: str, password: str | None = None) -> None:
        self.addr = addr
        self.user = user
        self.password = password
        self._session = requests.Session()

    @property
    def _auth(self) -> tuple[str, str]:
        return (self.user, self.password or "")

    def _url(self, endpoint: str) -> str:
        return f"{self.addr}{endpoint}"

    def delete(self, endpoint: str) -> None:
        """Send a DELETE request; failures are ignored."""
        try:
            self._session.delete(self._url(endpoint), auth=self._auth, timeout=_TIMEOUT)
        except requests.RequestException:
            pass

    def get(self, endpoint: str) -> Any:
        """GET ``endpoint`` and return the decoded JSON body."""
        response = self._session.get(self._url(endpoint), auth=self._auth, timeout=_TIMEOUT)
        return response.json()

    def post(self, endpoint: str, body: Any) -> Any:
        """POST ``body`` as JSON to ``endpoint`` and return the decoded reply."""
        response = self._session.post(
            self._url(endpoint), auth=self._auth, json=body, timeout=_TIMEOUT
        )
        return response.json()

    def get_exchange_overview(self) -> list[ExchangeInfo]:
        return [ExchangeInfo.from_json(item) for item in self.get("/api/exchanges")]

    def get_exchange_bindings(self, exchange: ExchangeInfo) -> list[ExchangeBindings]:
        endpoint = (
            f"/api/exchanges/{_encode_vhost(exchange.vhost)}/{exchange.name}/bindings/source"
        )
        return [ExchangeBindings.from_json(item) for item in self.get(endpoint)]

    def get_overview(self) -> Overview:
        return Overview.from_json(self.get("/api/overview"))

    def get_queues_info(self) -> list[QueueInfo]:
        return [QueueInfo.from_json(item) for item in self.get("/api/queues")]

    def post_queue_payload(self, queue_name: str, vhost: str, payload: str) -> None:
        url = self._url(f"/api/exchanges/{_encode_vhost(vhost)}//publish")
        body = PayloadPost().with_routing_key(queue_name).with_payload(payload)
        try:
            self._session.post(url, auth=_PUBLISH_AUTH, json=body.to_json(), timeout=_TIMEOUT)
        except requests.RequestException:
            pass

    def pop_queue_item(self, queue_name: str, vhost: str) -> MQMessage | None:
        endpoint = f"/api/queues/{_encode_vhost(vhost)}/{queue_name}/get"
        messages = self.post(endpoint, MQMessageGetBody().to_json())
        if not messages:
            return None
        return MQMessage.from_json(messages[0])

    def ping(self) -> bool:
        """Return whether the overview endpoint answers with a valid overview."""
        try:
            Overview.from_json(self.get("/api/overview"))
        except (requests.RequestException, ValueError):
            return False
        return True

    def purge_queue(self, queue_name: str, vhost: str) -> None:
        self.delete(f"/api/queues/{_encode_vhost(vhost)}/{queue_name}/contents")