"""
Grid configuration file adapter: path resolution, YAML/JSON reading and file size.

Related: gridlayout.contexts.grid.domain.services.config_resolver,
  apps.cli.commands.grid_commands
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from gridlayout.contexts.grid.domain.services import resolve_config
from gridlayout.shared_kernel.primitives import GridConfiguration

log = logging.getLogger(__name__)

_ENV_NAME_KEY = "GRIDLAYOUT_ENV"
_CONFIG_PATH_KEY = "GRIDLAYOUT_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")
_GRID_SECTION_KEY = "grid"


def load_grid_configuration(*, environ: Mapping[str, str]) -> GridConfiguration:
    """
    Load partial grid configuration from file and merge it with defaults.

    Args:
        environ: Environment mapping used to resolve env and config path.
    Returns:
        GridConfiguration: Resolved configuration.
    Assumptions:
        File values are merged as-is; they are not validated.
    Raises:
        FileNotFoundError: If config path does not exist.
        ValueError: If env value or file structure is invalid.
    Side Effects:
        Reads one file from disk.
    """
    config_path = resolve_grid_config_path(environ=environ)
    log.debug("loading grid config from %s", config_path)
    partial = read_grid_config(config_path)
    return resolve_config(partial)


def resolve_grid_config_path(*, environ: Mapping[str, str]) -> Path:
    """
    Resolve grid config path using explicit override or `GRIDLAYOUT_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        Path: Grid config path.
    Assumptions:
        `GRIDLAYOUT_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override)

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / "grid.yaml"


def read_grid_config(path: str | Path) -> dict[str, Any]:
    """
    Read partial grid configuration mapping from a YAML or JSON file.

    Args:
        path: Config file path.
    Returns:
        dict[str, Any]: `grid` section when present, otherwise the top-level mapping.
    Assumptions:
        JSON documents are valid YAML and go through the same parser.
    Raises:
        FileNotFoundError: If file does not exist.
        ValueError: If path is not a readable regular file, YAML is malformed or the
            structure is not a mapping.
    Side Effects:
        Reads one UTF-8 file from disk.
    """
    p = _require_config_file(path)

    try:
        text = p.read_text(encoding="utf-8")
    except OSError as error:
        raise ValueError(f"grid config is not readable: {p}: {error}") from error

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise ValueError(f"grid config is not valid YAML/JSON: {p}: {error}") from error

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("grid config must be a mapping at top-level")

    section = raw.get(_GRID_SECTION_KEY)
    if section is None:
        return dict(raw)
    if not isinstance(section, dict):
        raise ValueError("grid section must be a mapping")
    return dict(section)


def grid_config_size(path: str | Path) -> int:
    """
    Size of grid config file in bytes.

    Args:
        path: Config file path.
    Returns:
        int: File size in bytes.
    Assumptions:
        Path points to a regular file.
    Raises:
        FileNotFoundError: If file does not exist.
        ValueError: If path is not a regular file.
    Side Effects:
        Performs one `stat` call.
    """
    return _require_config_file(path).stat().st_size


def _require_config_file(path: str | Path) -> Path:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"grid config not found: {p}")
    if not p.is_file():
        raise ValueError(f"grid config must be a regular file: {p}")
    return p


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    """
    Resolve normalized runtime environment name.

    Args:
        environ: Environment mapping.
    Returns:
        str: One of `dev`, `prod`, `test`.
    Assumptions:
        Missing env falls back to `dev`.
    Raises:
        ValueError: If value is outside allowed set.
    Side Effects:
        None.
    """
    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return raw_env


__all__ = [
    "grid_config_size",
    "load_grid_configuration",
    "read_grid_config",
    "resolve_grid_config_path",
]
