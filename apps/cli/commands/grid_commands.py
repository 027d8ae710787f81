from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Mapping, Sequence

from apps.cli.wiring.config.grid_options import (
    add_config_arguments,
    add_format_argument,
    build_partial_config,
    parse_number,
    report_error,
    resolve_cli_config_path,
    to_grid_layout_error,
)
from gridlayout import calculate_dimensions, create_grid_descriptor, resolve_config
from gridlayout.platform.config import (
    grid_config_size,
    load_grid_configuration,
    resolve_grid_config_path,
)

log = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome"


class WelcomeCli:
    def run(self, argv: Sequence[str]) -> int:
        argparse.ArgumentParser(prog="welcome").parse_args(list(argv))
        log.info("greeting user")
        print(WELCOME_MESSAGE)
        return 0


class ResolveConfigCli:
    """Print grid configuration resolved from defaults, config file and flags."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def run(self, argv: Sequence[str]) -> int:
        p = argparse.ArgumentParser(prog="resolve")
        add_config_arguments(p)
        add_format_argument(p)
        ns = p.parse_args(list(argv))

        config_path: Path | None = None
        try:
            config_path = resolve_cli_config_path(ns, environ=self._environ)
            partial = build_partial_config(ns, config_path=config_path)
        except (FileNotFoundError, ValueError) as e:
            return report_error(
                to_grid_layout_error(e, path=config_path),
                output_format=ns.format,
            )

        config = resolve_config(partial)
        if ns.format == "json":
            print(json.dumps(config.to_mapping(), ensure_ascii=False))
        else:
            print(f"rows={config.rows} cols={config.cols} cell_size={config.cell_size}")
        return 0


class DimensionsCli:
    """Print how many whole cells fit into a container."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def run(self, argv: Sequence[str]) -> int:
        p = argparse.ArgumentParser(prog="dimensions")
        p.add_argument("--width", type=parse_number, required=True, help="Container width")
        p.add_argument("--height", type=parse_number, required=True, help="Container height")
        add_config_arguments(p)
        add_format_argument(p)
        ns = p.parse_args(list(argv))

        config_path: Path | None = None
        try:
            config_path = resolve_cli_config_path(ns, environ=self._environ)
            partial = build_partial_config(ns, config_path=config_path)
        except (FileNotFoundError, ValueError) as e:
            return report_error(
                to_grid_layout_error(e, path=config_path),
                output_format=ns.format,
            )

        cell_size = resolve_config(partial).cell_size
        try:
            position = calculate_dimensions(ns.width, ns.height, cell_size)
        except TypeError as e:
            # non-numeric cell_size from the config file (blank or text value)
            return report_error(
                to_grid_layout_error(e, path=config_path, key="cell_size", value=cell_size),
                output_format=ns.format,
            )
        log.info(
            "container %sx%s with cell_size=%s fits cols=%s rows=%s",
            ns.width,
            ns.height,
            cell_size,
            position.cols,
            position.rows,
        )

        if ns.format == "json":
            print(json.dumps({"x": position.x, "y": position.y}))
        else:
            print(f"cols={position.cols} rows={position.rows}")
        return 0


class SummaryCli:
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def run(self, argv: Sequence[str]) -> int:
        p = argparse.ArgumentParser(prog="summary")
        add_config_arguments(p)
        add_format_argument(p)
        ns = p.parse_args(list(argv))

        config_path: Path | None = None
        try:
            config_path = resolve_cli_config_path(ns, environ=self._environ)
            partial = build_partial_config(ns, config_path=config_path)
        except (FileNotFoundError, ValueError) as e:
            return report_error(
                to_grid_layout_error(e, path=config_path),
                output_format=ns.format,
            )

        descriptor = create_grid_descriptor(partial)
        if ns.format == "json":
            print(json.dumps({"summary": descriptor.summary()}, ensure_ascii=False))
        else:
            print(descriptor.summary())
        return 0


class ConfigSizeCli:
    """Print grid config file location, its size in bytes and the configuration it yields."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def run(self, argv: Sequence[str]) -> int:
        p = argparse.ArgumentParser(prog="size")
        p.add_argument(
            "--config",
            default=None,
            help="Path to grid config. Default: GRIDLAYOUT_CONFIG or configs/<GRIDLAYOUT_ENV>/grid.yaml",
        )
        add_format_argument(p)
        ns = p.parse_args(list(argv))

        environ = dict(self._environ)
        if ns.config:
            environ["GRIDLAYOUT_CONFIG"] = ns.config

        config_path: Path | None = None
        try:
            config_path = resolve_grid_config_path(environ=environ)
            size_bytes = grid_config_size(config_path)
            config = load_grid_configuration(environ=environ)
        except (FileNotFoundError, ValueError) as e:
            return report_error(
                to_grid_layout_error(e, path=config_path),
                output_format=ns.format,
            )

        if ns.format == "json":
            payload = {"path": str(config_path), "bytes": size_bytes, "config": config.to_mapping()}
            print(json.dumps(payload, ensure_ascii=False))
        else:
            print(
                f"path={config_path} bytes={size_bytes} "
                f"rows={config.rows} cols={config.cols} cell_size={config.cell_size}"
            )
        return 0
