from __future__ import annotations

import json
from pathlib import Path

import pytest

from gridlayout.platform.errors import GridLayoutError


def test_gridlayout_error_payload_carries_path_key_and_value() -> None:
    error = GridLayoutError(
        code=" config_invalid ",
        message=" unsupported operand ",
        path=Path("configs/dev/grid.yaml"),  # type: ignore[arg-type]
        key="cell_size",
        value="big",
    )

    assert error.to_payload() == {
        "error": {
            "code": "config_invalid",
            "message": "unsupported operand",
            "details": {"path": "configs/dev/grid.yaml", "key": "cell_size", "value": "big"},
        }
    }
    assert str(error) == "config_invalid: unsupported operand"


def test_gridlayout_error_omits_unset_details() -> None:
    assert GridLayoutError(code="config_invalid", message="bad").details() == {}
    assert GridLayoutError(code="x", message="y", path="grid.yaml").details() == {
        "path": "grid.yaml"
    }


def test_gridlayout_error_reports_none_value_when_key_is_set() -> None:
    error = GridLayoutError(code="config_invalid", message="blank", key="cell_size")

    assert error.details() == {"key": "cell_size", "value": None}


def test_gridlayout_error_renders_non_scalar_value_with_repr() -> None:
    error = GridLayoutError(code="config_invalid", message="bad", key="rows", value=[1, 2])

    payload = error.to_payload()
    assert payload["error"]["details"]["value"] == "[1, 2]"
    assert json.loads(json.dumps(payload)) == payload


def test_gridlayout_error_rejects_blank_code_and_message() -> None:
    with pytest.raises(ValueError):
        GridLayoutError(code=" ", message="x")
    with pytest.raises(ValueError):
        GridLayoutError(code="x", message="")
