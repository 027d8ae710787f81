from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from gridlayout.contexts.grid.domain.services import resolve_config
from gridlayout.shared_kernel.primitives import GridConfiguration


@dataclass(frozen=True, slots=True)
class GridDescriptor:
    """
    GridDescriptor — resolved grid configuration plus its human-readable summary.

    The configuration is stored verbatim at construction and never re-validated.
    """

    config: GridConfiguration

    def summary(self) -> str:
        """Fixed-format summary `Grid {rows}x{cols}`."""
        return f"Grid {self.config.rows}x{self.config.cols}"


def create_grid_descriptor(partial: Mapping[str, Any] | None = None) -> GridDescriptor:
    """
    Build descriptor from partial configuration merged with defaults.

    Args:
        partial: Optional partial grid configuration mapping.
    Returns:
        GridDescriptor: Descriptor wrapping `resolve_config(partial)`.
    Assumptions:
        Same merge rules as `resolve_config`.
    Raises:
        None.
    Side Effects:
        None.
    """
    return GridDescriptor(config=resolve_config(partial))


__all__ = ["GridDescriptor", "create_grid_descriptor"]
