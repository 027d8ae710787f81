from __future__ import annotations

from typing import Any, Mapping

from gridlayout.shared_kernel.primitives import DEFAULT_GRID_CONFIGURATION, GridConfiguration

# priority order: `cell_size` outranks the camel-case alias
_CELL_SIZE_ALIASES = ("cell_size", "cellSize")


def resolve_config(partial: Mapping[str, Any] | None = None) -> GridConfiguration:
    """
    Merge partial grid configuration with `DEFAULT_GRID_CONFIGURATION`.

    Args:
        partial: Optional mapping with any subset of `rows`, `cols`, `cell_size`
            (`cellSize` accepted as alias).
    Returns:
        GridConfiguration: Fully populated configuration.
    Assumptions:
        Only an absent key selects the default; a present key wins even when its
        value is `None`, non-numeric or non-positive. Unknown keys are ignored.
        `cell_size` has priority over `cellSize` when both are present.
    Raises:
        None.
    Side Effects:
        None.
    """
    if partial is None:
        partial = {}

    default = DEFAULT_GRID_CONFIGURATION
    cell_size = default.cell_size
    for key in _CELL_SIZE_ALIASES:
        if key in partial:
            cell_size = partial[key]
            break

    return GridConfiguration(
        rows=partial["rows"] if "rows" in partial else default.rows,
        cols=partial["cols"] if "cols" in partial else default.cols,
        cell_size=cell_size,
    )


__all__ = ["resolve_config"]
