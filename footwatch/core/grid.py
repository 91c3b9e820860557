"""
Pressure grid value type.

A Grid carries explicit width and height plus a flat row-major buffer.
Construction rejects any dimensional mismatch, so a Grid that exists is
always well-formed.

Dependencies: None (pure domain layer)
System role: Shape-checked pressure payloads for samples
"""

import enum
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence

from footwatch.core.exceptions import GridShapeError

MIN_DIMENSION = 1
MAX_DIMENSION = 64


class Foot(str, enum.Enum):
    """Which insole produced the frame."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


@dataclass(frozen=True)
class Grid:
    """Row-major pressure grid of ``height`` rows by ``width`` columns."""

    width: int
    height: int
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        for name, dim in (("grid_width", self.width), ("grid_height", self.height)):
            if not MIN_DIMENSION <= dim <= MAX_DIMENSION:
                raise GridShapeError(
                    f"{name} must be between {MIN_DIMENSION} and {MAX_DIMENSION}",
                    details={name: dim},
                )
        if len(self.values) != self.width * self.height:
            raise GridShapeError(
                "pressure buffer length does not match grid dimensions",
                details={
                    "grid_width": self.width,
                    "grid_height": self.height,
                    "cells": len(self.values),
                },
            )

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Any]],
        width: int | None = None,
        height: int | None = None,
    ) -> "Grid":
        """
        Build a grid from a list of rows.

        Missing dimensions are inferred from the row data; declared ones
        must match it exactly.

        Args:
            rows: Two-dimensional numeric array, one inner list per row
            width: Declared column count (grid_width)
            height: Declared row count (grid_height)

        Returns:
            Grid: Validated grid

        Raises:
            GridShapeError: If rows are empty, ragged, non-numeric, or
                disagree with the declared dimensions
        """
        if not rows:
            raise GridShapeError("pressure must contain at least one row")

        first = rows[0]
        if not isinstance(first, Sequence) or isinstance(first, (str, bytes)) or not first:
            raise GridShapeError("pressure must be a non-empty two-dimensional array")

        actual_height = len(rows)
        actual_width = len(first)
        if height is not None and height != actual_height:
            raise GridShapeError(
                f"pressure has {actual_height} rows but grid_height is {height}",
                details={"grid_height": height, "rows": actual_height},
            )
        if width is not None and width != actual_width:
            raise GridShapeError(
                f"pressure rows have {actual_width} columns but grid_width is {width}",
                details={"grid_width": width, "columns": actual_width},
            )

        flat: list[float] = []
        for row_index, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise GridShapeError(f"pressure row {row_index} is not an array")
            if len(row) != actual_width:
                raise GridShapeError(
                    f"pressure row {row_index} has {len(row)} columns, expected {actual_width}",
                    details={"row": row_index},
                )
            for col_index, cell in enumerate(row):
                flat.append(_cell_value(cell, row_index, col_index))

        return cls(width=actual_width, height=actual_height, values=tuple(flat))

    def to_rows(self) -> list[list[float]]:
        """Return the grid as a list of rows (storage and wire format)."""
        return [
            list(self.values[r * self.width:(r + 1) * self.width])
            for r in range(self.height)
        ]

    def at(self, row: int, col: int) -> float:
        """Cell value at (row, col)."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) outside {self.height}x{self.width} grid")
        return self.values[row * self.width + col]


def _cell_value(cell: Any, row: int, col: int) -> float:
    # bool is a Real subclass; a sensor never reports True
    if isinstance(cell, bool) or not isinstance(cell, Real):
        raise GridShapeError(
            f"pressure[{row}][{col}] is not a number",
            details={"row": row, "column": col},
        )
    value = float(cell)
    if not math.isfinite(value):
        raise GridShapeError(
            f"pressure[{row}][{col}] is not finite",
            details={"row": row, "column": col},
        )
    return value
