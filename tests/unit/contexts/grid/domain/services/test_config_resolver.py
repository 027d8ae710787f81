from __future__ import annotations

import pytest

from gridlayout import DEFAULT_GRID_CONFIGURATION, GridConfiguration, resolve_config


def test_resolve_config_without_partial_returns_defaults() -> None:
    assert resolve_config() == GridConfiguration(rows=10, cols=10, cell_size=32)
    assert resolve_config(None) == DEFAULT_GRID_CONFIGURATION
    assert resolve_config({}) == DEFAULT_GRID_CONFIGURATION


def test_resolve_config_overrides_only_supplied_rows() -> None:
    assert resolve_config({"rows": 5}) == GridConfiguration(rows=5, cols=10, cell_size=32)


@pytest.mark.parametrize(
    "partial",
    [
        {"cols": 3},
        {"rows": 2, "cell_size": 16},
        {"rows": 1, "cols": 2, "cell_size": 8.5},
    ],
)
def test_resolve_config_field_by_field_override(partial: dict[str, object]) -> None:
    """
    Verify every supplied field wins and every absent field falls back to default.

    Args:
        partial: Partial configuration mapping.
    Returns:
        None.
    Assumptions:
        Keys use snake-case names.
    Raises:
        AssertionError: If merge result differs from field-by-field expectation.
    Side Effects:
        None.
    """
    config = resolve_config(partial)

    for key in ("rows", "cols", "cell_size"):
        expected = partial[key] if key in partial else getattr(DEFAULT_GRID_CONFIGURATION, key)
        assert getattr(config, key) == expected


def test_resolve_config_accepts_camel_case_cell_size_alias() -> None:
    assert resolve_config({"cellSize": 64}).cell_size == 64
    assert resolve_config({"cellSize": 64, "cell_size": 8}).cell_size == 8


def test_resolve_config_passes_invalid_values_through() -> None:
    config = resolve_config({"rows": -1, "cols": 0, "cell_size": "wide"})

    assert config.rows == -1
    assert config.cols == 0
    assert config.cell_size == "wide"


def test_resolve_config_present_none_is_not_a_default_signal() -> None:
    assert resolve_config({"rows": None}).rows is None


def test_resolve_config_ignores_unknown_keys_and_does_not_mutate_input() -> None:
    partial = {"rows": 4, "color": "red"}

    config = resolve_config(partial)

    assert config == GridConfiguration(rows=4, cols=10, cell_size=32)
    assert partial == {"rows": 4, "color": "red"}
