from __future__ import annotations

import math

from gridlayout.shared_kernel.primitives import CellPosition


def calculate_dimensions(
    container_width: float,
    container_height: float,
    cell_size: float,
) -> CellPosition:
    """
    Count whole cells that fit into a container along each axis.

    Args:
        container_width: Container width in cell units.
        container_height: Container height in cell units.
        cell_size: Edge length of one square cell.
    Returns:
        CellPosition: `x` = floor(width / cell_size), `y` = floor(height / cell_size).
    Assumptions:
        Callers pass `cell_size > 0`; other values are not rejected and yield
        degenerate results (`inf`, `-inf`, `nan` or negative counts).
    Raises:
        None.
    Side Effects:
        None.
    """
    return CellPosition(
        x=_floor_quotient(numerator=container_width, denominator=cell_size),
        y=_floor_quotient(numerator=container_height, denominator=cell_size),
    )


def _floor_quotient(*, numerator: float, denominator: float) -> int | float:
    """
    Floor division with IEEE-754 semantics for zero and non-finite operands.

    Args:
        numerator: Container extent.
        denominator: Cell size.
    Returns:
        int | float: Floored `int` for finite quotients, otherwise `inf`/`-inf`/`nan`.
    Assumptions:
        Operands are real numbers; arbitrarily large ints saturate to `inf`.
    Raises:
        None.
    Side Effects:
        None.
    """
    if denominator == 0:
        if numerator == 0 or (isinstance(numerator, float) and math.isnan(numerator)):
            return math.nan
        return math.inf * _sign(numerator) * _sign(denominator)

    try:
        quotient = numerator / denominator
    except OverflowError:
        # int operands whose quotient exceeds float range
        return math.inf * _sign(numerator) * _sign(denominator)
    if not math.isfinite(quotient):
        return quotient
    return math.floor(quotient)


def _sign(value: float) -> float:
    # math.copysign converts to float and overflows on huge ints
    if isinstance(value, float):
        return math.copysign(1.0, value)
    return -1.0 if value < 0 else 1.0


__all__ = ["calculate_dimensions"]
