"""
Row: an ordered sequence of cells tagged with a grid discipline.

A row keeps no shape invariant of its own. Whether its length may change is
decided by the grid holding it.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from grid_types import Cell, Mode

T = TypeVar("T")

__all__ = ["Row"]


class Row(Generic[T]):
    """A row of cells. Column index is the position in the row."""

    __slots__ = ("cells", "mode")

    def __init__(self, mode: Mode = Mode.JAGGED) -> None:
        self.cells: list[Cell[T]] = []
        self.mode = mode

    @classmethod
    def new(cls, mode: Mode = Mode.JAGGED) -> Row[T]:
        return cls(mode)

    @classmethod
    def from_values(cls, values: Iterable[T], mode: Mode = Mode.JAGGED) -> Row[T]:
        """Build a row holding one cell per value, in order.

        A Row passed as ``values`` is copied value by value, not cell by cell.
        """
        if isinstance(values, Row):
            values = values.values()
        row: Row[T] = cls(mode)
        row.cells = [Cell(v) for v in values]
        return row

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def push(self, value: T) -> None:
        """Append a cell holding ``value``.

        Pushing onto a row of a rectangular grid makes that row longer than
        its siblings; grow rectangular grids with ``add_column`` instead.
        """
        self.cells.append(Cell(value))

    def pop(self) -> T | None:
        """Remove the last cell and return its value, or None if empty."""
        if not self.cells:
            return None
        return self.cells.pop().value

    def resize(self, new_length: int, fill_value: T) -> None:
        """Grow with ``fill_value`` or truncate from the end to ``new_length``.

        Every new cell holds the same ``fill_value`` object, so a mutable fill
        is shared between them.
        """
        if new_length < 0:
            raise ValueError(
                f"Invalid row length: {new_length}\n"
                f"  Current length: {len(self.cells)}\n"
                f"  Row length must be zero or positive"
            )
        if new_length < len(self.cells):
            del self.cells[new_length:]
        else:
            self.cells.extend(Cell(fill_value) for _ in range(new_length - len(self.cells)))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def get(self, i: int) -> T | None:
        cell = self.get_mut(i)
        return None if cell is None else cell.value

    def get_mut(self, i: int) -> Cell[T] | None:
        """Return the cell at ``i`` (assign ``.value`` to write), or None."""
        if i < 0 or i >= len(self.cells):
            return None
        return self.cells[i]

    def values(self) -> list[T]:
        return [c.value for c in self.cells]

    def relabel(self, mode: Mode) -> Row[T]:
        """Return a copy of this row tagged with ``mode``. Values are unchanged."""
        return Row.from_values(self.values(), mode)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, i: int) -> Cell[T]:
        return self.cells[i]

    def __setitem__(self, i: int, value: T) -> None:
        self.cells[i].value = value

    def __iter__(self) -> Iterator[Cell[T]]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self.mode is other.mode and self.cells == other.cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Row({self.values()!r}, mode={self.mode.name})"
