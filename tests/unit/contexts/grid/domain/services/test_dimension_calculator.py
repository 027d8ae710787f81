from __future__ import annotations

import math

from gridlayout import CellPosition, calculate_dimensions


def test_calculate_dimensions_floors_partial_cells() -> None:
    assert calculate_dimensions(320, 240, 32) == CellPosition(x=10, y=7)


def test_calculate_dimensions_zero_container_axis_is_empty() -> None:
    assert calculate_dimensions(0, 100, 10) == CellPosition(x=0, y=10)


def test_calculate_dimensions_returns_ints_for_finite_quotients() -> None:
    position = calculate_dimensions(100.5, 99.9, 10.0)

    assert position == CellPosition(x=10, y=9)
    assert isinstance(position.x, int)
    assert isinstance(position.y, int)


def test_calculate_dimensions_zero_cell_size_is_non_finite_not_error() -> None:
    position = calculate_dimensions(100, 100, 0)

    assert not math.isfinite(position.x)
    assert not math.isfinite(position.y)
    assert position.x == math.inf


def test_calculate_dimensions_zero_by_zero_is_nan() -> None:
    position = calculate_dimensions(0, -5, 0)

    assert math.isnan(position.x)
    assert position.y == -math.inf


def test_calculate_dimensions_negative_cell_size_gives_negative_counts() -> None:
    assert calculate_dimensions(100, 95, -10) == CellPosition(x=-10, y=-10)


def test_calculate_dimensions_is_deterministic() -> None:
    assert calculate_dimensions(1024, 768, 48) == calculate_dimensions(1024, 768, 48)


def test_calculate_dimensions_huge_int_container_saturates_to_infinity() -> None:
    position = calculate_dimensions(10**400, 100, 1)

    assert position.x == math.inf
    assert position.y == 100


def test_calculate_dimensions_huge_int_with_negative_cell_size_is_negative_infinity() -> None:
    assert calculate_dimensions(10**400, -(10**400), -1) == CellPosition(x=-math.inf, y=math.inf)


def test_calculate_dimensions_huge_int_with_zero_cell_size_is_infinity() -> None:
    position = calculate_dimensions(10**400, 0, 0)

    assert position.x == math.inf
    assert math.isnan(position.y)
