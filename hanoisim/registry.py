"""The collection of packages known to a simulation."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from hanoisim.graph import Graph
from hanoisim.package import Package


class PackageRegistry:
    """Packages kept in the order they were added."""

    def __init__(self, packages: Iterable[Package] = ()) -> None:
        self._packages: list[Package] = list(packages)

    def add(self, package: Package) -> None:
        """Register a package."""
        self._packages.append(package)

    def find(self, package_id: int) -> Optional[Package]:
        """The most recently added package with this id, or None."""
        return next((p for p in reversed(self._packages) if p.id == package_id), None)

    def __iter__(self) -> Iterator[Package]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)


def read_packages(tokens: Iterable[str], graph: Graph) -> PackageRegistry:
    """Read a count followed by records ``<time> pac <id> org <origin> dst <destination>``.

    Packages are numbered in reading order; the id in the record is ignored.
    Each gets its shortest route through the graph.
    """
    it = iter(tokens)
    registry = PackageRegistry()
    try:
        count = int(next(it))
        for number in range(count):
            posted_at = int(next(it))
            next(it)  # "pac"
            next(it)  # id given in the record
            next(it)  # "org"
            origin = int(next(it))
            next(it)  # "dst"
            destination = int(next(it))
            registry.add(
                Package(
                    id=number,
                    origin=origin,
                    destination=destination,
                    posted_at=posted_at,
                    sender="org",
                    recipient="dst",
                    kind="pac",
                    route=graph.route(origin, destination),
                )
            )
    except StopIteration:
        raise ValueError("truncated package list") from None
    return registry