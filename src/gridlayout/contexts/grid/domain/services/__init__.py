from .config_resolver import resolve_config
from .dimension_calculator import calculate_dimensions

__all__ = [
    "calculate_dimensions",
    "resolve_config",
]
