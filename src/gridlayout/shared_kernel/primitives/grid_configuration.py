from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GridConfiguration:
    """
    GridConfiguration — logical grid shape: row count, column count and cell size.

    Semantics:
    - `cell_size` is expressed in container units (pixels or abstract units).

    Invariants:
    - none enforced here; values are stored exactly as resolved, including
      non-positive or non-numeric ones.
    """

    rows: Any
    cols: Any
    cell_size: Any

    def to_mapping(self) -> dict[str, Any]:
        """Plain mapping with snake-case keys, used for logs and JSON output."""
        return {"rows": self.rows, "cols": self.cols, "cell_size": self.cell_size}


DEFAULT_GRID_CONFIGURATION = GridConfiguration(rows=10, cols=10, cell_size=32)
