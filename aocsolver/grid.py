"""A rectangular grid of cells stored row by row."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Grid:
    """Row-major grid whose width is fixed by the first line inserted."""

    def __init__(self) -> None:
        self._cells: list[Any] = []
        self._width = 0

    def __copy__(self) -> Grid:
        duplicate = Grid()
        duplicate._cells = list(self._cells)
        duplicate._width = self._width
        return duplicate

    def set_width_and_height(self, width: int, height: int, default: Any = None) -> None:
        """Set the width and resize the grid to ``width * height`` cells."""
        self._width = width
        size = width * height
        if len(self._cells) > size:
            del self._cells[size:]
        else:
            self._cells.extend([default] * (size - len(self._cells)))

    def _adopt_width(self, row: list[Any]) -> list[Any]:
        if not self._width:
            self._width = len(row)
        return row

    def insert_line(self, line: Iterable[Any]) -> None:
        """Append a row at the bottom."""
        self._cells.extend(self._adopt_width(list(line)))

    def insert_line_front(self, line: Iterable[Any]) -> None:
        """Insert a row at the top."""
        self._cells[:0] = self._adopt_width(list(line))

    def insert_padding_lines(self, padding: Any) -> None:
        """Surround the grid with one row of ``padding`` above and below."""
        self.insert_line([padding] * self._width)
        self.insert_line_front([padding] * self._width)

    def _index(self, location: Iterable[int]) -> int:
        x, y = location
        if not (0 <= x < self._width and 0 <= y < self.size_y()):
            raise IndexError(f"location {tuple(location)!r} is outside the grid")
        return y * self._width + x

    def __getitem__(self, location: Iterable[int]) -> Any:
        return self._cells[self._index(location)]

    def __setitem__(self, location: Iterable[int], value: Any) -> None:
        self._cells[self._index(location)] = value

    def size_x(self) -> int:
        return self._width

    def size_y(self) -> int:
        return len(self._cells) // self._width if self._width else 0

    def is_border_location(self, location: Iterable[int]) -> bool:
        """True if the location lies on the outermost ring of the grid."""
        x, y = location
        return x in (0, self.size_x() - 1) or y in (0, self.size_y() - 1)

    def cells(self) -> Iterator[tuple[Any, int, int]]:
        """Yield ``(value, x, y)`` for every cell in row-major order."""
        for index, value in enumerate(self._cells):
            y, x = divmod(index, self._width)
            yield value, x, y

    def render(self, space_value: Any = None) -> str:
        """Draw the grid, showing cells equal to ``space_value`` as blanks."""
        rows = []
        for y in range(self.size_y()):
            row = self._cells[y * self._width:(y + 1) * self._width]
            rows.append("".join(" " if value == space_value else str(value) for value in row))
        return "".join(f"{row}\n" for row in rows)

    def data(self) -> list[Any]:
        """A copy of all cells in row-major order."""
        return list(self._cells)