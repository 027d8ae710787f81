from __future__ import annotations

import logging
import sys

from apps.cli.commands.grid_commands import (
    ConfigSizeCli,
    DimensionsCli,
    ResolveConfigCli,
    SummaryCli,
    WelcomeCli,
)

_USAGE = (
    "Usage:\n"
    "  welcome\n"
    "  resolve [--config PATH] [--rows N] [--cols N] [--cell-size X] [--format text|json]\n"
    "  dimensions --width W --height H [--cell-size X] [--config PATH] [--format text|json]\n"
    "  summary [--config PATH] [--rows N] [--cols N] [--format text|json]\n"
    "  size [--config PATH] [--format text|json]\n"
)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = argv if argv is not None else sys.argv[1:]

    if not args:
        print(_USAGE)
        return 2

    cmd = args[0]
    rest = args[1:]

    if cmd == "welcome":
        return WelcomeCli().run(rest)
    if cmd == "resolve":
        return ResolveConfigCli().run(rest)
    if cmd == "dimensions":
        return DimensionsCli().run(rest)
    if cmd == "summary":
        return SummaryCli().run(rest)
    if cmd == "size":
        return ConfigSizeCli().run(rest)

    print(f"unknown command: {cmd!r}\n\n{_USAGE}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
