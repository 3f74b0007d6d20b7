"""Simulation events: package arrivals and periodic transports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from hanoisim.package import Package


class EventType(IntEnum):
    """Kinds of scheduled events."""

    ARRIVAL = 1
    TRANSPORT = 2


@dataclass(eq=False)
class Event:
    """A scheduled event, ordered by time and then by deterministic tie-breakers."""

    kind: EventType
    time: int
    package: Optional[Package] = None
    origin: int = -1
    destination: int = -1
    counter: int = 0

    def __lt__(self, other: "Event") -> bool:
        if self.time != other.time:
            return self.time < other.time
        if self.kind == EventType.ARRIVAL and other.kind == EventType.ARRIVAL:
            return self.package.id < other.package.id
        if self.kind == EventType.TRANSPORT and other.kind == EventType.TRANSPORT:
            return (self.origin, self.destination) < (other.origin, other.destination)
        # At equal times, transports come before arrivals.
        return self.kind > other.kind


def arrival(time: int, package: Package) -> Event:
    """An event for the package arriving at its current warehouse."""
    return Event(EventType.ARRIVAL, time, package)


def transport(time: int, origin: int, destination: int) -> Event:
    """An event for a transport leaving origin towards destination."""
    return Event(EventType.TRANSPORT, time, origin=origin, destination=destination)