from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_SCALAR_TYPES = (str, int, float, bool)


@dataclass(frozen=True, slots=True)
class GridLayoutError(Exception):
    """
    GridLayoutError — failure to obtain a usable grid configuration at the CLI boundary.

    Carries where the configuration came from (`path`) and, when one field is to blame,
    the offending `key` and its raw `value`.

    Related:
      - apps/cli/wiring/config/grid_options.py
      - src/gridlayout/platform/config/grid_config_file.py
    """

    code: str
    message: str
    path: str | None = None
    key: str | None = None
    value: Any = None

    def __post_init__(self) -> None:
        """
        Normalize code/message and coerce location fields to plain strings.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            `code` is a stable machine-readable token such as `config_not_found`.
        Raises:
            ValueError: If `code` or `message` are blank.
        Side Effects:
            Rewrites frozen slots `code`, `message` and `path` with normalized values.
        """
        normalized_code = self.code.strip()
        normalized_message = self.message.strip()
        if not normalized_code:
            raise ValueError("GridLayoutError.code must be non-empty")
        if not normalized_message:
            raise ValueError("GridLayoutError.message must be non-empty")

        object.__setattr__(self, "code", normalized_code)
        object.__setattr__(self, "message", normalized_message)
        if self.path is not None:
            object.__setattr__(self, "path", str(self.path))

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def details(self) -> dict[str, Any]:
        """
        Location details with unset fields omitted.

        Args:
            None.
        Returns:
            dict[str, Any]: Subset of `path`, `key`, `value` in that order.
        Assumptions:
            `value` is reported only together with `key`; non-scalar values are
            rendered with `repr` so the payload stays JSON-serializable.
        Raises:
            None.
        Side Effects:
            None.
        """
        result: dict[str, Any] = {}
        if self.path is not None:
            result["path"] = self.path
        if self.key is not None:
            result["key"] = self.key
            result["value"] = _plain_value(self.value)
        return result

    def to_payload(self) -> dict[str, Any]:
        """`{"error": {"code", "message", "details"}}` payload for JSON output."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details(),
            }
        }


def _plain_value(value: Any) -> Any:
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    return repr(value)
