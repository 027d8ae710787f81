from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CellPosition:
    """
    CellPosition — number of whole cells that fit into a container.

    Naming:
    - `x` holds the column count, `y` holds the row count (not coordinates).
    - values are `int` for finite quotients and `float` (`inf`/`nan`) for degenerate
      cell sizes.
    """

    x: int | float
    y: int | float

    @property
    def cols(self) -> int | float:
        return self.x

    @property
    def rows(self) -> int | float:
        return self.y
