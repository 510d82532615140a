"""
Shared type definitions for the symgrid system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class Mode(Enum):
    """Shape discipline of a grid (and the tag carried by its rows)."""

    RECTANGULAR = "rectangular"  # Every row has the same length
    JAGGED = "jagged"  # Rows may have any length


# =============================================================================
# Cell
# =============================================================================


@dataclass
class Cell(Generic[T]):
    """A single grid cell owning one value.

    Arithmetic between two cells applies the operator to the wrapped values
    and wraps the result. It only works where the values support it.
    """

    value: T

    @classmethod
    def wrap(cls, value: T) -> Cell[T]:
        return cls(value)

    def unwrap(self) -> T:
        return self.value

    def _lift(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if not isinstance(other, Cell):
            return NotImplemented
        return Cell(op(self.value, other.value))

    def __add__(self, other: Any) -> Any:
        return self._lift(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Any:
        return self._lift(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Any:
        return self._lift(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Any:
        return self._lift(other, lambda a, b: a / b)

    def __floordiv__(self, other: Any) -> Any:
        return self._lift(other, lambda a, b: a // b)


Point = tuple[int, int]  # (row, column)
DefaultFactory = Callable[[], Any]
