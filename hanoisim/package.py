"""Packages travelling between warehouses along a precomputed route."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class PackageState(IntEnum):
    """Lifecycle stages of a package."""

    NOT_POSTED = 1
    ARRIVAL_SCHEDULED = 2
    STORED = 3
    REMOVED = 4
    DELIVERED = 5


# The state counter keeps growing with every storage until it reaches this value.
_STATE_CEILING = 6


@dataclass
class Package:
    """A package with its route through the warehouse network and its statistics."""

    id: int
    origin: int
    destination: int
    posted_at: int = 0
    sender: str = ""
    recipient: str = ""
    kind: str = ""
    route: list[int] = field(default_factory=list)
    position: int = 0
    state: int = PackageState.NOT_POSTED
    storage_time: int = 0
    transit_time: int = 0

    def __post_init__(self) -> None:
        self.route = list(self.route)

    def advance_route(self) -> bool:
        """Move to the next warehouse of the route; False if already at the end."""
        if self.position + 1 < len(self.route):
            self.position += 1
            return True
        return False

    def advance_state(self) -> None:
        """Step the state counter forward, stopping at its ceiling."""
        if self.state < _STATE_CEILING:
            self.state += 1

    def record_storage_time(self, start: int, end: int) -> None:
        """Add the interval from start to end to the total time spent stored."""
        self.storage_time += end - start

    def record_transit_time(self, start: int, end: int) -> None:
        """Add the interval from start to end to the total time spent in transit."""
        self.transit_time += end - start

    def statistics(self) -> str:
        """Return a human-readable report of the package."""
        return "\n".join(
            [
                f"Pacote ID: {self.id}",
                f"Remetente: {self.sender}",
                f"Destinatário: {self.recipient}",
                f"Tipo: {self.kind}",
                f"Origem: {self.origin} → Destino: {self.destination}",
                f"Estado atual: {self.state}",
                f"Tempo armazenado total: {self.storage_time}",
                f"Tempo transporte total: {self.transit_time}",
            ]
        )

    def current_warehouse(self) -> Optional[int]:
        """The warehouse the package is at, or None if the route is exhausted."""
        if self.position < len(self.route):
            return self.route[self.position]
        return None

    def next_warehouse(self) -> Optional[int]:
        """The next warehouse of the route, or None if there is none."""
        if self.position + 1 < len(self.route):
            return self.route[self.position + 1]
        return None