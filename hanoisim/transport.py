"""The carrier that moves packages between neighbouring warehouses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hanoisim.event import arrival
from hanoisim.scheduler import Scheduler
from hanoisim.warehouse import Warehouse


@dataclass
class Transport:
    """Transport parameters: capacity per trip, trip duration, period and removal cost."""

    capacity: int = 0
    transit_time: int = 0
    interval: int = 0
    removal_cost: int = 0

    def dispatch(
        self,
        warehouse: Optional[Warehouse],
        destination: int,
        scheduler: Scheduler,
        now: int,
    ) -> list[str]:
        """Empty one section, ship the oldest packages and put the rest back.

        Every package of the section is removed, each removal costing
        ``removal_cost``. The packages stored earliest are shipped, up to
        ``capacity``, with an arrival scheduled ``transit_time`` after the last
        removal. The others are stored again in their original order.
        Returns the log lines of the operation.
        """
        if warehouse is None or self.capacity <= 0:
            return []

        lines: list[str] = []
        clock = now
        removed = []
        while not warehouse.section_empty(destination):
            package = warehouse.retrieve(destination)
            if package is None:
                break
            clock += self.removal_cost
            lines.append(
                f"{clock:07d} pacote {package.id:03d} removido de "
                f"{warehouse.id:03d} na secao {destination:03d}"
            )
            removed.append(package)

        # Packages were popped newest first; ship starting from the oldest.
        removed.reverse()
        shipped, remaining = removed[: self.capacity], removed[self.capacity :]

        for package in shipped:
            lines.append(
                f"{clock:07d} pacote {package.id:03d} em transito de "
                f"{warehouse.id:03d} para {package.next_warehouse():03d}"
            )
            scheduler.push(arrival(clock + self.transit_time, package))

        for package in remaining:
            warehouse.store(package)
            lines.append(
                f"{clock:07d} pacote {package.id:03d} rearmazenado em "
                f"{warehouse.id:03d} na secao {destination:03d}"
            )
        return lines