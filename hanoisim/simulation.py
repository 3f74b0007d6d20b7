"""Discrete-event simulation of packages moving through the warehouse network."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from hanoisim.event import EventType, arrival, transport
from hanoisim.graph import Graph
from hanoisim.registry import PackageRegistry, read_packages
from hanoisim.scheduler import Scheduler
from hanoisim.transport import Transport


@dataclass
class SimulationConfig:
    """Everything an input file describes."""

    capacity: int
    transit_time: int
    interval: int
    removal_cost: int
    graph: Graph
    packages: PackageRegistry


def parse_input(text: str) -> SimulationConfig:
    """Parse the transport parameters, the network and the packages."""
    tokens = iter(text.split())
    try:
        capacity, transit_time, interval, removal_cost = (int(next(tokens)) for _ in range(4))
    except (StopIteration, RuntimeError):
        raise ValueError("missing transport parameters") from None
    graph = Graph.read(tokens)
    packages = read_packages(tokens, graph)
    return SimulationConfig(capacity, transit_time, interval, removal_cost, graph, packages)


class Simulation:
    """Runs the event loop until every package is delivered or no event is left."""

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self.graph = config.graph
        self.packages = config.packages
        self.transport = Transport(
            config.capacity, config.transit_time, config.interval, config.removal_cost
        )
        self.scheduler = Scheduler()

    def _schedule_initial_events(self) -> None:
        for package in self.packages:
            self.scheduler.push(arrival(package.posted_at, package))

        first = self.packages.find(0)
        if first is None:
            return
        start = first.posted_at + self.config.interval
        for i, j in self.graph.edges():
            self.scheduler.push(transport(start, i, j))
            self.scheduler.push(transport(start, j, i))

    def run(self) -> list[str]:
        """Run the simulation and return its log lines."""
        lines: list[str] = []
        self._schedule_initial_events()
        delivered = 0
        total = len(self.packages)

        while self.scheduler and delivered < total:
            event = self.scheduler.pop()
            clock = event.time

            if event.kind == EventType.ARRIVAL:
                package = event.package
                if package is None:
                    continue
                if package.state > 1:
                    package.advance_route()
                current = package.current_warehouse()
                following = package.next_warehouse()
                if current is None:
                    raise ValueError(f"package {package.id} has no route to its destination")
                if current == package.destination:
                    lines.append(
                        f"{clock:07d} pacote {package.id:03d} entregue em {package.destination:03d}"
                    )
                    delivered += 1
                else:
                    self.graph.warehouse(current).store(package)
                    section = -1 if following is None else following
                    lines.append(
                        f"{clock:07d} pacote {package.id:03d} armazenado em "
                        f"{current:03d} na secao {section:03d}"
                    )
                    package.advance_state()

            elif event.kind == EventType.TRANSPORT:
                warehouse = self.graph.warehouse(event.origin)
                lines.extend(
                    self.transport.dispatch(warehouse, event.destination, self.scheduler, clock)
                )
                self.scheduler.push(
                    transport(clock + self.config.interval, warehouse.id, event.destination)
                )
        return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Simulate the input file named on the command line and print the log."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Uso: hanoisim <input.txt>", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"Erro: Não foi possível abrir o arquivo {args[0]}", file=sys.stderr)
        return 1
    for line in Simulation(parse_input(text)).run():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())