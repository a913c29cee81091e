"""Data models for the RabbitMQ management API."""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class Ackmode(Enum):
    """How fetched messages are acknowledged."""

    ACK_REQUEUE_TRUE = "ack_requeue_true"
    ACK_REQUEUE_FALSE = "ack_requeue_false"
    REJECT_REQUEUE_TRUE = "reject_requeue_true"
    REJECT_REQUEUE_FALSE = "reject_requeue_false"


class MQEncoding(Enum):
    """Payload encoding requested when fetching messages."""

    AUTO = "auto"


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


def format_rate(value: float) -> str:
    """Render a per-second rate, e.g. ``1.5`` as ``"1.5/s"``."""
    return f"{_format_float(float(value))}/s"


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected an object, got {data!r}")
    return data


def _lookup(data: Mapping[str, Any], name: str, aliases: tuple[str, ...], optional: bool) -> Any:
    for key in (name, *aliases):
        if key in data:
            return data[key]
    if optional:
        return _MISSING
    raise ValueError(f"missing field {name!r}")


def _typed(
    data: Mapping[str, Any],
    name: str,
    aliases: tuple[str, ...],
    check: Callable[[Any], bool],
    expected: str,
    default: Any,
) -> Any:
    value = _lookup(data, name, aliases, optional=default is not _MISSING)
    if value is _MISSING:
        return default
    if not check(value):
        raise ValueError(f"field {name!r}: expected {expected}, got {value!r}")
    return value


def _str(data: Mapping[str, Any], name: str, *aliases: str) -> str:
    return _typed(data, name, aliases, lambda v: isinstance(v, str), "a string", _MISSING)


def _bool(data: Mapping[str, Any], name: str, *aliases: str) -> bool:
    return _typed(data, name, aliases, lambda v: isinstance(v, bool), "a boolean", _MISSING)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _float(data: Mapping[str, Any], name: str, *aliases: str, default: Any = _MISSING) -> float:
    return float(_typed(data, name, aliases, _is_number, "a number", default))


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _uint(data: Mapping[str, Any], name: str, *aliases: str, default: Any = _MISSING) -> int:
    return _typed(data, name, aliases, _is_uint, "a non-negative integer", default)


def _nested(
    data: Mapping[str, Any],
    parse: Callable[[Any], T],
    name: str,
    *aliases: str,
    default: Callable[[], T] | None = None,
) -> T:
    value = _lookup(data, name, aliases, optional=default is not None)
    if value is _MISSING:
        assert default is not None
        return default()
    return parse(value)


@dataclass
class RateContainer:
    """A rate reported by the API, in events per second."""

    rate: float = 0.0

    @classmethod
    def from_json(cls, data: Any) -> RateContainer:
        data = _mapping(data, "rate")
        return cls(rate=_float(data, "rate"))


@dataclass
class ExchangeMsgStats:
    """Publish rates of an exchange."""

    in_rate: RateContainer = field(default_factory=RateContainer)
    out_rate: RateContainer = field(default_factory=RateContainer)

    @classmethod
    def from_json(cls, data: Any) -> ExchangeMsgStats:
        data = _mapping(data, "exchange message stats")
        return cls(
            in_rate=_nested(
                data, RateContainer.from_json, "in_rate", "publish_in_details", default=RateContainer
            ),
            out_rate=_nested(
                data, RateContainer.from_json, "out_rate", "publish_out_details", default=RateContainer
            ),
        )


@dataclass
class ExchangeInfo:
    """One exchange as listed by ``/api/exchanges``."""

    HEADERS: ClassVar[tuple[str, ...]] = ("Name", "Type", "Rate In", "Rate Out")

    auto_delete: bool
    durable: bool
    internal: bool
    name: str
    kind: str
    user_who_performed_action: str
    vhost: str
    message_stats: ExchangeMsgStats = field(default_factory=ExchangeMsgStats)

    @classmethod
    def from_json(cls, data: Any) -> ExchangeInfo:
        data = _mapping(data, "exchange")
        return cls(
            auto_delete=_bool(data, "auto_delete"),
            durable=_bool(data, "durable"),
            internal=_bool(data, "internal"),
            name=_str(data, "name"),
            kind=_str(data, "t", "type"),
            user_who_performed_action=_str(data, "user_who_performed_action"),
            vhost=_str(data, "vhost"),
            message_stats=_nested(
                data, ExchangeMsgStats.from_json, "message_stats", default=ExchangeMsgStats
            ),
        )

    def to_row(self) -> list[str]:
        return [
            self.name or "(AMQP DEFAULT)",
            self.kind,
            format_rate(self.message_stats.in_rate.rate),
            format_rate(self.message_stats.out_rate.rate),
        ]


@dataclass
class ExchangeBindings:
    """A binding whose source is an exchange."""

    HEADERS: ClassVar[tuple[str, ...]] = ("To", "Routing key")

    source: str
    vhost: str
    dest: str
    dest_type: str
    routing_key: str
    prop_key: str

    @classmethod
    def from_json(cls, data: Any) -> ExchangeBindings:
        data = _mapping(data, "binding")
        return cls(
            source=_str(data, "source"),
            vhost=_str(data, "vhost"),
            dest=_str(data, "dest", "destination"),
            dest_type=_str(data, "dest_type", "destination_type"),
            routing_key=_str(data, "routing_key"),
            prop_key=_str(data, "prop_key", "properties_key"),
        )

    def to_row(self) -> list[str]:
        return [self.dest, self.routing_key]


@dataclass
class OverviewQueueTotals:
    """Message counts summed over all queues."""

    messages: float
    messages_ready: float
    messages_unacked: float

    @classmethod
    def from_json(cls, data: Any) -> OverviewQueueTotals:
        data = _mapping(data, "queue totals")
        return cls(
            messages=_float(data, "messages"),
            messages_ready=_float(data, "messages_ready"),
            messages_unacked=_float(data, "messages_unacked", "messages_unacknowledged"),
        )


@dataclass
class OverviewMessageRates:
    """Disk activity counters and rates."""

    disk_reads: float
    disk_reads_details: RateContainer
    disk_writes: float
    disk_writes_details: RateContainer

    @classmethod
    def from_json(cls, data: Any) -> OverviewMessageRates:
        data = _mapping(data, "message stats")
        return cls(
            disk_reads=_float(data, "disk_reads"),
            disk_reads_details=_nested(data, RateContainer.from_json, "disk_reads_details"),
            disk_writes=_float(data, "disk_writes"),
            disk_writes_details=_nested(data, RateContainer.from_json, "disk_writes_details"),
        )


@dataclass
class Overview:
    """The broker-wide summary from ``/api/overview``."""

    queue_totals: OverviewQueueTotals
    message_stats: OverviewMessageRates

    @classmethod
    def from_json(cls, data: Any) -> Overview:
        data = _mapping(data, "overview")
        return cls(
            queue_totals=_nested(data, OverviewQueueTotals.from_json, "queue_totals"),
            message_stats=_nested(data, OverviewMessageRates.from_json, "message_stats"),
        )


@dataclass
class QueueMsgStats:
    """Message counters and rates of a queue."""

    publish: int = 0
    publish_details: RateContainer = field(default_factory=RateContainer)
    deliver_get: int = 0
    deliver_get_details: RateContainer = field(default_factory=RateContainer)
    ack: int = 0
    ack_details: RateContainer = field(default_factory=RateContainer)

    @classmethod
    def from_json(cls, data: Any) -> QueueMsgStats:
        data = _mapping(data, "queue message stats")

        def rate(name: str) -> RateContainer:
            return _nested(data, RateContainer.from_json, name, default=RateContainer)

        return cls(
            publish=_uint(data, "publish", default=0),
            publish_details=rate("publish_details"),
            deliver_get=_uint(data, "deliver_get", default=0),
            deliver_get_details=rate("deliver_get_details"),
            ack=_uint(data, "ack", default=0),
            ack_details=rate("ack_details"),
        )


@dataclass
class QueueInfo:
    """One queue as listed by ``/api/queues``."""

    HEADERS: ClassVar[tuple[str, ...]] = (
        "Name",
        "Type",
        "State",
        "Ready",
        "Unacked",
        "Total",
        "Incoming",
        "Deliver / Get",
        "Ack",
    )

    name: str
    kind: str
    state: str
    ready: int
    unacked: int
    total: int
    vhost: str
    message_stats: QueueMsgStats = field(default_factory=QueueMsgStats)

    @classmethod
    def from_json(cls, data: Any) -> QueueInfo:
        data = _mapping(data, "queue")
        return cls(
            name=_str(data, "name"),
            kind=_str(data, "t", "type"),
            state=_str(data, "state"),
            ready=_uint(data, "ready", "messages_ready"),
            unacked=_uint(data, "unacked", "messages_unacknowledged"),
            total=_uint(data, "total", "messages"),
            vhost=_str(data, "vhost"),
            message_stats=_nested(
                data, QueueMsgStats.from_json, "message_stats", default=QueueMsgStats
            ),
        )

    def to_row(self) -> list[str]:
        stats = self.message_stats
        # The "Incoming" column shows the ack rate, as the original display does.
        return [
            self.name,
            self.kind,
            self.state,
            str(self.ready),
            str(self.unacked),
            str(self.total),
            format_rate(stats.ack_details.rate),
            format_rate(stats.deliver_get_details.rate),
            format_rate(stats.ack_details.rate),
        ]


@dataclass
class PayloadPost:
    """Body for publishing a message through an exchange."""

    properties: dict[str, str] = field(default_factory=dict)
    routing_key: str = ""
    payload: str = ""
    encoding: str = "string"

    def with_routing_key(self, key: str) -> PayloadPost:
        return dataclasses.replace(self, routing_key=key)

    def with_payload(self, payload: str) -> PayloadPost:
        return dataclasses.replace(self, payload=payload)

    def to_json(self) -> dict[str, Any]:
        return {
            "properties": dict(self.properties),
            "routing_key": self.routing_key,
            "payload": self.payload,
            "payload_encoding": self.encoding,
        }


@dataclass
class MQMessageGetBody:
    """Body for fetching messages from a queue."""

    count: int = 1
    ackmode: Ackmode = Ackmode.REJECT_REQUEUE_TRUE
    encoding: MQEncoding = MQEncoding.AUTO

    def to_json(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "ackmode": self.ackmode.value,
            "encoding": self.encoding.value,
        }


@dataclass
class MQMessage:
    """A message fetched from a queue."""

    payload_bytes: int
    redelivered: bool
    exchange: str
    routing_key: str
    payload: str

    @classmethod
    def from_json(cls, data: Any) -> MQMessage:
        data = _mapping(data, "message")
        return cls(
            payload_bytes=_uint(data, "payload_bytes"),
            redelivered=_bool(data, "redelivered"),
            exchange=_str(data, "exchange"),
            routing_key=_str(data, "routing_key"),
            payload=_str(data, "payload"),
        )