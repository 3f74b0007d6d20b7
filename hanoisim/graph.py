"""Warehouse network topology and shortest-route search."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Sequence

from hanoisim.warehouse import Warehouse


class Graph:
    """Undirected network of warehouses given by an adjacency matrix."""

    def __init__(self, adjacency: Sequence[Sequence[int]]) -> None:
        matrix = [[int(value) for value in row] for row in adjacency]
        size = len(matrix)
        if any(len(row) != size for row in matrix):
            raise ValueError("adjacency matrix must be square")
        self._matrix = matrix
        self._warehouses = [Warehouse(i, size) for i in range(size)]

    @classmethod
    def read(cls, tokens: Iterable[str]) -> "Graph":
        """Build a graph from whitespace tokens: a size n followed by n*n entries.

        When given an iterator, exactly the consumed tokens are taken from it.
        """
        it = iter(tokens)
        try:
            size = int(next(it))
            if size < 0:
                raise ValueError("number of warehouses cannot be negative")
            rows = [[int(next(it)) for _ in range(size)] for _ in range(size)]
        except StopIteration:
            raise ValueError("truncated adjacency matrix") from None
        return cls(rows)

    @property
    def adjacency(self) -> list[list[int]]:
        """A copy of the adjacency matrix."""
        return [list(row) for row in self._matrix]

    def route(self, origin: int, destination: int) -> list[int]:
        """Shortest route by breadth-first search; empty if none or invalid ends."""
        size = len(self._matrix)
        if not (0 <= origin < size and 0 <= destination < size):
            return []
        if origin == destination:
            return [origin]

        predecessor = {origin: None}
        queue = deque([origin])
        while queue and destination not in predecessor:
            current = queue.popleft()
            for neighbour, linked in enumerate(self._matrix[current]):
                if linked == 1 and neighbour not in predecessor:
                    predecessor[neighbour] = current
                    queue.append(neighbour)
                    if neighbour == destination:
                        break

        if destination not in predecessor:
            return []
        path = []
        node = destination
        while node is not None:
            path.append(node)
            node = predecessor[node]
        path.reverse()
        return path

    def warehouse(self, warehouse_id: int) -> Warehouse:
        """The warehouse with the given id."""
        if not 0 <= warehouse_id < len(self._warehouses):
            raise IndexError(f"no warehouse {warehouse_id}")
        return self._warehouses[warehouse_id]

    def warehouses_empty(self) -> bool:
        """True if no warehouse holds any package."""
        return all(w.is_empty() for w in self._warehouses)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Connected pairs (i, j) with i < j, in row-major order."""
        for i, row in enumerate(self._matrix):
            for j in range(i + 1, len(row)):
                if row[j] == 1:
                    yield i, j

    def __len__(self) -> int:
        return len(self._matrix)