# hanoisim

A discrete-event simulator for packages that travel through a network of
warehouses. Each warehouse keeps one stack-shaped section per possible next
warehouse. Packages are posted at an origin, stored in the section for their
next hop, and carried along the shortest route by periodic transports until
they are delivered.

## Installation

```
pip install .
```

## Usage

```
hanoisim input.txt
```

The command reads one input file and prints one line per event to standard
output. Without an argument, or when the file cannot be opened, it writes a
message to standard error and exits with status 1.

### Input format

All values are whitespace-separated integers, with a few literal words:

1. Transport capacity, transport time, interval between transports, and the
   cost of removing one package from a section.
2. The number of warehouses `n`, followed by an `n × n` adjacency matrix
   (`1` where two warehouses are connected).
3. The number of packages `m`, followed by `m` records of the form

   ```
   <posting time> pac <id> org <origin> dst <destination>
   ```

   The `<id>` in a record is ignored: packages are numbered in the order they
   appear, starting at 0.

Missing values raise `ValueError`.

### Example

```
2 20 10 2
2
0 1
1 0
1
5 pac 0 org 0 dst 1
```

produces

```
0000005 pacote 000 armazenado em 000 na secao 001
0000017 pacote 000 removido de 000 na secao 001
0000017 pacote 000 em transito de 000 para 001
0000037 pacote 000 entregue em 001
```

### How the simulation runs

- Each package arrives at its origin at its posting time and is pushed onto the
  section for its next warehouse.
- Transports between every pair of connected warehouses, in both directions,
  start one interval after the posting time of package 0 and repeat every
  interval.
- A transport removes every package from its section, each removal adding the
  removal cost to the clock. The packages stored earliest are shipped, up to
  the capacity, and arrive after the transport time; the rest are stored again
  and reported as `rearmazenado`.
- Events at the same time run transports first (ordered by origin, then
  destination), then arrivals (ordered by package id).
- The run ends once every package is delivered or no event is left. A package
  whose destination cannot be reached raises `ValueError`.

## Library use

```python
from hanoisim.simulation import Simulation, parse_input

with open("input.txt", encoding="utf-8") as handle:
    config = parse_input(handle.read())

for line in Simulation(config).run():
    print(line)
```

`Simulation.run` returns the log lines instead of printing them.

Other pieces:

- `hanoisim.graph.Graph` — the adjacency matrix; `Graph.read` builds one from
  tokens, `Graph.route` finds a shortest route by breadth-first search (an
  empty list if there is none), `Graph.edges` yields connected pairs.
- `hanoisim.warehouse.Warehouse` — per-destination stacks with `store`,
  `retrieve`, `section_empty` and `is_empty`.
- `hanoisim.scheduler.Scheduler` — a min-heap of events holding at most
  100 000 by default; `push` on a full queue and `pop` on an empty one raise
  `SchedulerError`. `summary` describes the pending events.
- `hanoisim.event` — `Event`, `EventType`, and the `arrival` and `transport`
  constructors.
- `hanoisim.transport.Transport` — `dispatch` performs one transport and
  returns its log lines.
- `hanoisim.registry` — `PackageRegistry` and `read_packages`.
- `hanoisim.package.Package` — route position, state counter, and
  `statistics()`, a text report of the package.

## What it does not do

The simulation does not record time spent in storage or in transit:
`Package.record_storage_time` and `Package.record_transit_time` exist but the
run never calls them, and no per-package statistics are printed. Nothing is
saved to disk; the log goes to standard output only.

## Running the tests

```
pip install ".[test]"
pytest
```