"""Collection run state and the calls that send data to a DogStatsD client."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, IntEnum
from typing import Any


class Item(str, Enum):
    """Names of the counters kept for each collection run."""

    ALARM = "Alarm"
    ANOMALY = "Anomaly"
    EVENT = "Event"
    IDS = "IDS"
    PDU = "PDU"
    UAP = "UAP"
    UDM = "UDM"
    USG = "USG"
    USW = "USW"
    UXG = "UXG"


class ServiceCheckStatus(IntEnum):
    OK = 0
    WARN = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass
class StatsdEvent:
    title: str
    text: str
    timestamp: datetime
    tags: list[str] = field(default_factory=list)


@dataclass
class ServiceCheck:
    name: str
    status: ServiceCheckStatus
    timestamp: datetime
    message: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class Filter:
    """Selects which input to collect from and, for events, how far back."""

    name: str = ""
    dur: timedelta | None = None


@dataclass
class Metrics:
    rogue_aps: list[Any] = field(default_factory=list)
    sites: list[Any] = field(default_factory=list)
    sites_dpi: list[Any] = field(default_factory=list)
    clients: list[Any] = field(default_factory=list)
    clients_dpi: list[Any] = field(default_factory=list)
    devices: list[Any] = field(default_factory=list)


@dataclass
class Events:
    logs: list[Any] = field(default_factory=list)


@dataclass
class Counts:
    """Named counters guarded by a lock."""

    val: dict[Item, int] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add(self, name: Item, *args: int) -> None:
        """Add each count to ``name``, or one when no count is given."""
        with self._lock:
            increment = sum(args) if args else 1
            self.val[name] = self.val.get(name, 0) + increment


@dataclass
class Report:
    """Data and results of one collection run."""

    metrics: Metrics = field(default_factory=Metrics)
    events: Events = field(default_factory=Events)
    collector: Any = None
    client: Any = None
    errors: list[Exception] = field(default_factory=list)
    counts: Counts = field(default_factory=Counts)
    start: datetime = field(default_factory=datetime.now)
    end: datetime | None = None
    elapsed: timedelta = field(default_factory=timedelta)
    total: int = 0
    fields: int = 0

    def add_count(self, name: Item, *args: int) -> None:
        self.counts.add(name, *args)

    def error(self, err: Exception | None) -> None:
        """Record an error; ``None`` is ignored."""
        if err is not None:
            self.errors.append(err)

    def report_gauge(self, name: str, value: float, tags: list[str]) -> None:
        self.client.gauge(name, value, tags, 1.0)

    def report_count(self, name: str, value: int, tags: list[str]) -> None:
        self.client.count(name, value, tags, 1.0)

    def report_distribution(self, name: str, value: float, tags: list[str]) -> None:
        self.client.distribution(name, value, tags, 1.0)

    def report_timing(self, name: str, value: timedelta, tags: list[str]) -> None:
        self.client.timing(name, value, tags, 1.0)

    def report_event(
        self, title: str, date: datetime | None, message: str, tags: list[str]
    ) -> None:
        """Send an event; a missing date means now."""
        if date is None:
            date = datetime.now().astimezone()
        self.client.event(StatsdEvent(title=title, text=message, timestamp=date, tags=tags))

    def report_info_log(self, message: str, *args: Any) -> None:
        self.collector.logf(message, *args)

    def report_warn_log(self, message: str, *args: Any) -> None:
        self.collector.logf(message, *args)

    def report_service_check(
        self, name: str, status: ServiceCheckStatus, message: str, tags: list[str]
    ) -> None:
        self.client.service_check(
            ServiceCheck(
                name=name,
                status=status,
                timestamp=datetime.now().astimezone(),
                message=message,
                tags=tags,
            )
        )