"""A bounded min-priority queue of simulation events."""

from __future__ import annotations

import heapq

from hanoisim.event import Event

MAX_EVENTS = 100_000


class SchedulerError(Exception):
    """Raised when the event queue is full or empty."""


class Scheduler:
    """Min-heap of events with a fixed capacity."""

    def __init__(self, capacity: int = MAX_EVENTS) -> None:
        self.capacity = capacity
        self._heap: list[Event] = []

    def push(self, event: Event) -> None:
        """Schedule an event."""
        if len(self._heap) >= self.capacity:
            raise SchedulerError("event queue is full")
        heapq.heappush(self._heap, event)

    def pop(self) -> Event:
        """Remove and return the earliest event."""
        if not self._heap:
            raise SchedulerError("event queue is empty")
        return heapq.heappop(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def summary(self) -> str:
        """Report the events still pending, in queue order."""
        lines = [
            "[Estatísticas do Escalonamento]",
            f"Eventos restantes na fila: {len(self._heap)}",
        ]
        lines.extend(
            f"Evento tipo {int(e.kind)} agendado para {e.time}h" for e in self._heap
        )
        return "\n".join(lines)