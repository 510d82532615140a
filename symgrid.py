"""
Two-dimensional grids with a fixed shape discipline.

RectangularGrid keeps every row the same length and grows on write.
JaggedGrid lets rows vary in length. Each class carries only the
mutators valid for its discipline; switching discipline is an explicit
conversion that returns a new grid.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from grid_row import Row
from grid_types import Cell, DefaultFactory, Mode

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["BaseGrid", "RectangularGrid", "JaggedGrid", "from_rows"]


# =============================================================================
# Shared read-only interface
# =============================================================================


class BaseGrid(Generic[T]):
    """Row storage and the read operations common to both disciplines."""

    mode: Mode

    def __init__(self, default_factory: DefaultFactory = int) -> None:
        self.rows: list[Row[T]] = []
        self.default_factory: Callable[[], T] = default_factory

    @classmethod
    def new(cls, default_factory: DefaultFactory = int) -> BaseGrid[T]:
        return cls(default_factory)

    def get_point(self, x: int, y: int) -> T | None:
        """Return the value at row ``x``, column ``y``, or None if out of range."""
        cell = self.get_point_mut(x, y)
        return None if cell is None else cell.value

    def get_point_mut(self, x: int, y: int) -> Cell[T] | None:
        """Return the cell at ``(x, y)`` for writing through ``.value``, or None."""
        if x < 0 or x >= len(self.rows):
            return None
        return self.rows[x].get_mut(y)

    def iter_values(self) -> Iterator[T]:
        """Yield every value in row-major order."""
        for row in self.rows:
            for cell in row.cells:
                yield cell.value

    def iter_cells(self) -> Iterator[Cell[T]]:
        """Yield every cell in row-major order, for in-place updates."""
        for row in self.rows:
            yield from row.cells

    def row_lengths(self) -> list[int]:
        return [len(row) for row in self.rows]

    def is_empty(self) -> bool:
        return not self.rows

    def to_lists(self) -> list[list[T]]:
        return [row.values() for row in self.rows]

    def _copy_rows(self, mode: Mode) -> list[Row[T]]:
        return [row.relabel(mode) for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, x: int) -> Row[T]:
        return self.rows[x]

    def __iter__(self) -> Iterator[Row[T]]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseGrid):
            return NotImplemented
        return self.mode is other.mode and self.rows == other.rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_lists()!r})"


# =============================================================================
# Rectangular discipline
# =============================================================================


class RectangularGrid(BaseGrid[T]):
    """A grid whose rows all have the same length.

    Growth operations (``add_row``, ``add_column``, ``push_point``) keep the
    invariant: a new row is born at the current column count and a new
    column is added to every row at once.
    """

    mode = Mode.RECTANGULAR

    @classmethod
    def with_size(
        cls, row_count: int, col_count: int, default_factory: DefaultFactory = int
    ) -> RectangularGrid[T]:
        """Build a ``row_count`` x ``col_count`` grid of default values in one pass."""
        if row_count < 0 or col_count < 0:
            raise ValueError(
                f"Invalid grid size: {row_count} x {col_count}\n"
                f"  Row and column counts must be zero or positive"
            )
        grid: RectangularGrid[T] = cls(default_factory)
        for _ in range(row_count):
            row: Row[T] = Row(Mode.RECTANGULAR)
            row.cells = [Cell(default_factory()) for _ in range(col_count)]
            grid.rows.append(row)
        logger.debug("with_size: built %d x %d grid", row_count, col_count)
        return grid

    @classmethod
    def from_rows(
        cls, rows: Iterable[Iterable[T]], default_factory: DefaultFactory = int
    ) -> RectangularGrid[T]:
        """Build a grid from rows that already share one length.

        Raises:
            ValueError: If the rows differ in length. Use
                ``JaggedGrid.from_rows(...).to_rectangular()`` to pad instead.
        """
        built = [Row.from_values(r, Mode.RECTANGULAR) for r in rows]
        if built:
            cols = len(built[0])
            mismatched = [(i, len(row)) for i, row in enumerate(built) if len(row) != cols]
            if mismatched:
                error_msg = (
                    f"Inconsistent row lengths for a rectangular grid\n"
                    f"  Expected: {cols} columns (from row 0)\n"
                    f"  Mismatched rows:\n"
                )
                for row_idx, actual_cols in mismatched:
                    error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
                error_msg += "  All rows must have the same number of cells"
                raise ValueError(error_msg)
        grid: RectangularGrid[T] = cls(default_factory)
        grid.rows = built
        return grid

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.rows), self.column_count)

    def add_row(self) -> None:
        """Append a row sized to the current column count."""
        width = self.column_count
        row: Row[T] = Row(Mode.RECTANGULAR)
        row.cells = [Cell(self.default_factory()) for _ in range(width)]
        self.rows.append(row)

    def add_column(self) -> None:
        """Append one default cell to every row, creating a first row if needed."""
        if not self.rows:
            self.rows.append(Row(Mode.RECTANGULAR))
        for row in self.rows:
            row.push(self.default_factory())

    def push_point(self, x: int, y: int, value: T) -> None:
        """Place ``value`` at row ``x``, column ``y``, growing the grid to fit.

        Columns are grown before rows so that every new row is created at
        its final width. Growth stops as soon as ``(x, y)`` is valid.
        """
        if x < 0 or y < 0:
            raise ValueError(
                f"Invalid point: ({x}, {y})\n"
                f"  Grid shape: {self.shape[0]} x {self.shape[1]}\n"
                f"  Point coordinates must be zero or positive"
            )

        rows_before, cols_before = self.shape

        # A column can only be added once a row exists
        if not self.rows:
            self.rows.append(Row(Mode.RECTANGULAR))
        while len(self.rows[0]) <= y:
            self.add_column()
        while len(self.rows) <= x:
            self.add_row()

        rows_after, cols_after = self.shape
        if (rows_after, cols_after) != (rows_before, cols_before):
            logger.debug(
                "push_point(%d, %d): grew %d x %d -> %d x %d",
                x,
                y,
                rows_before,
                cols_before,
                rows_after,
                cols_after,
            )
        self.rows[x][y] = value

    def to_jagged(self) -> JaggedGrid[T]:
        """Return the same data as a jagged grid."""
        grid: JaggedGrid[T] = JaggedGrid(self.default_factory)
        grid.rows = self._copy_rows(Mode.JAGGED)
        logger.debug("to_jagged: %d rows relabelled", len(grid.rows))
        return grid


# =============================================================================
# Jagged discipline
# =============================================================================


class JaggedGrid(BaseGrid[T]):
    """A grid whose rows may differ in length."""

    mode = Mode.JAGGED

    @classmethod
    def from_rows(
        cls, rows: Iterable[Iterable[T]], default_factory: DefaultFactory = int
    ) -> JaggedGrid[T]:
        """Build a grid from any iterable of rows, keeping each row's length.

        Rows are copied, so the new grid never shares cells with its input.
        """
        grid: JaggedGrid[T] = cls(default_factory)
        for r in rows:
            grid.push_row(r.relabel(Mode.JAGGED) if isinstance(r, Row) else r)
        return grid

    def add_row(self) -> None:
        """Append an empty row."""
        self.rows.append(Row(Mode.JAGGED))

    def pop_row(self) -> Row[T] | None:
        """Remove and return the last row, or None if there are no rows."""
        if not self.rows:
            return None
        return self.rows.pop()

    def push_row(self, row: Row[T] | Iterable[T]) -> None:
        """Append a row. Plain iterables are wrapped in a new Row."""
        if isinstance(row, Row):
            if row.mode is not Mode.JAGGED:
                row = row.relabel(Mode.JAGGED)
            self.rows.append(row)
        else:
            self.rows.append(Row.from_values(row, Mode.JAGGED))

    def resize(self, new_row_count: int) -> None:
        """Grow with empty rows or truncate from the end to ``new_row_count``."""
        if new_row_count < 0:
            raise ValueError(
                f"Invalid row count: {new_row_count}\n"
                f"  Current row count: {len(self.rows)}\n"
                f"  Row count must be zero or positive"
            )
        if new_row_count < len(self.rows):
            del self.rows[new_row_count:]
        else:
            for _ in range(new_row_count - len(self.rows)):
                self.add_row()

    def to_rectangular(self) -> RectangularGrid[T]:
        """Return a rectangular grid, right-padding short rows with defaults.

        Rows are only padded, never truncated.
        """
        max_len = max((len(row) for row in self.rows), default=0)
        grid: RectangularGrid[T] = RectangularGrid(self.default_factory)
        grid.rows = self._copy_rows(Mode.RECTANGULAR)
        padded = 0
        for row in grid.rows:
            missing = max_len - len(row)
            for _ in range(missing):
                row.push(self.default_factory())
            padded += missing
        logger.debug(
            "to_rectangular: %d rows at width %d, %d cells padded",
            len(grid.rows),
            max_len,
            padded,
        )
        return grid


def from_rows(
    rows: Iterable[Iterable[T]], default_factory: DefaultFactory = int
) -> JaggedGrid[T]:
    """Build a grid from externally supplied rows.

    The result is always jagged, even when the rows happen to share a
    length. Call ``to_rectangular()`` to get a rectangular grid.
    """
    return JaggedGrid.from_rows(rows, default_factory)
