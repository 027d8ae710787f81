from .grid_descriptor import GridDescriptor, create_grid_descriptor

__all__ = [
    "GridDescriptor",
    "create_grid_descriptor",
]
