"""
Shared Kernel primitives.

This package re-exports the grid value objects so that other modules can
import them from one place:

    from gridlayout.shared_kernel.primitives import CellPosition, GridConfiguration
"""

from .cell_position import CellPosition
from .grid_configuration import DEFAULT_GRID_CONFIGURATION, GridConfiguration

__all__ = [
    "CellPosition",
    "DEFAULT_GRID_CONFIGURATION",
    "GridConfiguration",
]
