from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping

from gridlayout.platform.config import read_grid_config, resolve_grid_config_path
from gridlayout.platform.errors import GridLayoutError

log = logging.getLogger(__name__)

_ENV_CONFIG_KEYS = ("GRIDLAYOUT_CONFIG", "GRIDLAYOUT_ENV")


def parse_number(raw: str) -> int | float:
    """
    Parse CLI numeric argument, keeping integral values as `int`.

    Args:
        raw: Raw argument string.
    Returns:
        int | float: Parsed number.
    Assumptions:
        Base-10 integers and float literals (including `inf`) are accepted.
    Raises:
        argparse.ArgumentTypeError: If value is not a number.
    Side Effects:
        None.
    """
    value = raw.strip()
    try:
        return int(value, 10)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"expected a number, got {raw!r}") from error


def add_config_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        default=None,
        help="Path to grid config (YAML or JSON). Default: GRIDLAYOUT_CONFIG / GRIDLAYOUT_ENV",
    )
    p.add_argument("--rows", type=parse_number, default=None, help="Override row count")
    p.add_argument("--cols", type=parse_number, default=None, help="Override column count")
    p.add_argument("--cell-size", type=parse_number, default=None, help="Override cell size")


def add_format_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format",
    )


def resolve_cli_config_path(
    ns: argparse.Namespace,
    *,
    environ: Mapping[str, str],
) -> Path | None:
    """
    Resolve which grid config file the command should read, if any.

    Args:
        ns: Parsed CLI namespace with `config`.
        environ: Environment mapping used when `--config` is absent.
    Returns:
        Path | None: `--config` path, env-derived path, or `None` for defaults only.
    Assumptions:
        Without `--config` and without grid env keys, no file is read.
    Raises:
        ValueError: If `GRIDLAYOUT_ENV` value is invalid.
    Side Effects:
        None.
    """
    if ns.config:
        return Path(ns.config)
    if any(environ.get(key, "").strip() for key in _ENV_CONFIG_KEYS):
        return resolve_grid_config_path(environ=environ)
    return None


def build_partial_config(
    ns: argparse.Namespace,
    *,
    config_path: Path | None,
) -> dict[str, Any]:
    """
    Build partial grid configuration from config file and CLI overrides.

    Args:
        ns: Parsed CLI namespace with `rows`, `cols`, `cell_size`.
        config_path: File to read, or `None` to use flags only.
    Returns:
        dict[str, Any]: Partial configuration; flags > file values.
    Assumptions:
        File values are not validated.
    Raises:
        FileNotFoundError: If config file does not exist.
        ValueError: If config file is invalid.
    Side Effects:
        May read one file from disk.
    """
    partial: dict[str, Any] = {}
    if config_path is not None:
        log.info("reading grid config from %s", config_path)
        partial.update(read_grid_config(config_path))

    for key in ("rows", "cols", "cell_size"):
        value = getattr(ns, key, None)
        if value is not None:
            partial[key] = value
    return partial


def to_grid_layout_error(
    error: Exception,
    *,
    path: Path | None = None,
    key: str | None = None,
    value: Any = None,
) -> GridLayoutError:
    """
    Map config loading or evaluation failure into `GridLayoutError`.

    Args:
        error: `FileNotFoundError`, `ValueError` or `TypeError` raised by config handling.
        path: Config file involved, if any.
        key: Offending configuration field, if one is to blame.
        value: Raw value of `key`.
    Returns:
        GridLayoutError: `config_not_found` for missing files, `config_invalid` otherwise.
    Assumptions:
        Error message is non-empty.
    Raises:
        None.
    Side Effects:
        None.
    """
    code = "config_not_found" if isinstance(error, FileNotFoundError) else "config_invalid"
    return GridLayoutError(
        code=code,
        message=str(error),
        path=None if path is None else str(path),
        key=key,
        value=value,
    )


def report_error(error: GridLayoutError, *, output_format: str) -> int:
    log.error("grid command failed: %s", error)
    if output_format == "json":
        print(json.dumps(error.to_payload(), ensure_ascii=False), file=sys.stderr)
    else:
        print(f"error: {error}", file=sys.stderr)
    return 1
