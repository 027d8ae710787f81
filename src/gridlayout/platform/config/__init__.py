from .grid_config_file import (
    grid_config_size,
    load_grid_configuration,
    read_grid_config,
    resolve_grid_config_path,
)

__all__ = [
    "grid_config_size",
    "load_grid_configuration",
    "read_grid_config",
    "resolve_grid_config_path",
]
