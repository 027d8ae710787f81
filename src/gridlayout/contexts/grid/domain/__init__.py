from .entities import GridDescriptor, create_grid_descriptor
from .services import calculate_dimensions, resolve_config

__all__ = [
    "GridDescriptor",
    "calculate_dimensions",
    "create_grid_descriptor",
    "resolve_config",
]
