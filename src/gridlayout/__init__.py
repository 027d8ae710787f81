"""
gridlayout — configuration-driven grid layout calculator.

    from gridlayout import calculate_dimensions, create_grid_descriptor, resolve_config
"""

from .contexts.grid.domain import (
    GridDescriptor,
    calculate_dimensions,
    create_grid_descriptor,
    resolve_config,
)
from .shared_kernel.primitives import DEFAULT_GRID_CONFIGURATION, CellPosition, GridConfiguration

__all__ = [
    "CellPosition",
    "DEFAULT_GRID_CONFIGURATION",
    "GridConfiguration",
    "GridDescriptor",
    "calculate_dimensions",
    "create_grid_descriptor",
    "resolve_config",
]
