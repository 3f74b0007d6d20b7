"""Warehouses holding one stack of packages per destination section."""

from __future__ import annotations

from typing import Optional

from hanoisim.package import Package


class Warehouse:
    """A warehouse with a LIFO section for each possible next destination."""

    def __init__(self, warehouse_id: int, sections: int) -> None:
        if sections < 0:
            raise ValueError("number of sections cannot be negative")
        self.id = warehouse_id
        self._sections: list[list[Package]] = [[] for _ in range(sections)]

    def _valid(self, destination: Optional[int]) -> bool:
        return destination is not None and 0 <= destination < len(self._sections)

    def store(self, package: Package) -> bool:
        """Push the package onto the section of its next warehouse.

        Returns False, storing nothing, when that section does not exist.
        """
        destination = package.next_warehouse()
        if not self._valid(destination):
            return False
        self._sections[destination].append(package)
        return True

    def retrieve(self, destination: int) -> Optional[Package]:
        """Pop the top package of a section, or None if it is empty or invalid."""
        if not self._valid(destination) or not self._sections[destination]:
            return None
        return self._sections[destination].pop()

    def section_empty(self, destination: int) -> bool:
        """True if the section holds nothing; invalid sections count as empty."""
        if not self._valid(destination):
            return True
        return not self._sections[destination]

    def is_empty(self) -> bool:
        """True if every section is empty."""
        return not any(self._sections)