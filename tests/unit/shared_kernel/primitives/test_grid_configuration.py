from __future__ import annotations

import dataclasses

import pytest

from gridlayout.shared_kernel.primitives import (
    DEFAULT_GRID_CONFIGURATION,
    CellPosition,
    GridConfiguration,
)


def test_default_grid_configuration_values() -> None:
    assert DEFAULT_GRID_CONFIGURATION == GridConfiguration(rows=10, cols=10, cell_size=32)


def test_default_grid_configuration_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_GRID_CONFIGURATION.rows = 1  # type: ignore[misc]


def test_grid_configuration_does_not_validate_values() -> None:
    # permissive: the resolver passes invalid values through unchanged
    config = GridConfiguration(rows=0, cols=-3, cell_size="big")
    assert config.to_mapping() == {"rows": 0, "cols": -3, "cell_size": "big"}


def test_cell_position_aliases_keep_column_then_row_order() -> None:
    position = CellPosition(x=10, y=7)
    assert position.cols == 10
    assert position.rows == 7
