"""
TerraGrid: the size x size accumulator filled by one grid-generation call.

Octaves only ever add into it. Once generation finishes the grid is frozen
and further writes raise FrozenGridError; readers get tuples, never the
internal lists.
"""

from typing import Iterator, List, Tuple

from ..errors import FrozenGridError


class TerraGrid:
    def __init__(self, size: int) -> None:
        self._size = max(size, 0)
        self._cells: List[List[float]] = [[0.0] * self._size for _ in range(self._size)]
        self._frozen = False

    @property
    def size(self) -> int:
        return self._size

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, x: int, y: int, value: float) -> None:
        if self._frozen:
            raise FrozenGridError("TerraGrid is read-only once generation has finished")
        self._cells[y][x] += value

    def freeze(self) -> "TerraGrid":
        self._frozen = True
        return self

    def value(self, x: int, y: int) -> float:
        return self._cells[y][x]

    def min(self) -> float:
        return min(min(row) for row in self._cells)

    def max(self) -> float:
        return max(max(row) for row in self._cells)

    def to_list(self) -> List[List[float]]:
        """Independent copy as nested lists (e.g. for json.dump)."""
        return [list(row) for row in self._cells]

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, y: int) -> Tuple[float, ...]:
        return tuple(self._cells[y])

    def __iter__(self) -> Iterator[Tuple[float, ...]]:
        for row in self._cells:
            yield tuple(row)

    def __eq__(self, other) -> bool:
        if isinstance(other, TerraGrid):
            return self._cells == other._cells
        return NotImplemented

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"TerraGrid(size={self._size}, {state})"
