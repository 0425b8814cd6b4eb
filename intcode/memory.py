from __future__ import annotations

from collections.abc import Iterable

from intcode.errors import AddressError

DEFAULT_MAX_MEMORY = 2**24


class Memory:
    """Zero-filled, growable word store.

    Reads beyond the current length return 0 without allocating; writes
    beyond it extend the backing list. Negative addresses and addresses at
    or past `limit` are rejected.
    """

    __slots__ = ("_cells", "_limit")

    def __init__(self, values: Iterable[int] = (), *, limit: int = DEFAULT_MAX_MEMORY) -> None:
        self._cells: list[int] = list(values)
        if limit <= 0:
            raise ValueError(f"memory limit must be positive, got {limit}")
        if len(self._cells) > limit:
            raise ValueError(f"program of {len(self._cells)} words exceeds memory limit of {limit}")
        self._limit = limit

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def limit(self) -> int:
        return self._limit

    def in_bounds(self, address: int) -> bool:
        return 0 <= address < self._limit

    def read(self, address: int) -> int:
        if not self.in_bounds(address):
            raise AddressError(address)
        if address >= len(self._cells):
            return 0
        return self._cells[address]

    def write(self, address: int, value: int) -> None:
        if not self.in_bounds(address):
            raise AddressError(address)
        size = len(self._cells)
        if address >= size:
            self._cells.extend([0] * (address + 1 - size))
        self._cells[address] = value

    def snapshot(self) -> list[int]:
        return list(self._cells)
