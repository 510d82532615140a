"""
Literal construction helpers for symgrid.

Example:
    grid([[1, 2, 3], [4, 5]])
        -> RectangularGrid([[1, 2, 3], [4, 5, 0]])
    grid_jagged([[1, 2, 3], [4, 5]])
        -> JaggedGrid([[1, 2, 3], [4, 5]])
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from grid_types import DefaultFactory
from symgrid import JaggedGrid, RectangularGrid

T = TypeVar("T")

__all__ = ["grid", "grid_jagged"]


def grid_jagged(
    rows: Iterable[Iterable[T]] = (), default_factory: DefaultFactory = int
) -> JaggedGrid[T]:
    """Build a jagged grid from nested iterables, one row per inner iterable."""
    return JaggedGrid.from_rows(rows, default_factory)


def grid(
    rows: Iterable[Iterable[T]] = (), default_factory: DefaultFactory = int
) -> RectangularGrid[T]:
    """Build a rectangular grid from nested iterables.

    Short rows are padded on the right with ``default_factory()`` values.
    """
    return grid_jagged(rows, default_factory).to_rectangular()
