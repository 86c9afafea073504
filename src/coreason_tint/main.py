# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

import sys
from pathlib import Path
from typing import Annotated

import typer

from coreason_tint import __version__
from coreason_tint.console import new
from coreason_tint.file import new_file_logger
from coreason_tint.utils.logger import logger

app = typer.Typer(
    name="coreason-tint",
    help="CLI for coreason-tint: colorized console and plain file logging on loguru.",
    add_completion=False,
)

LevelOption = Annotated[str, typer.Option("--level", "-l", envvar="TINT_LEVEL", help="Minimum level to write")]


@app.command()
def demo(level: LevelOption = "debug") -> None:
    """
    Print one sample line per level with the console logger.
    """
    try:
        handle = new(level)
    except ValueError:
        logger.exception("Invalid logging level")
        sys.exit(1)

    with handle:
        sugar = handle.sugar
        sugar.debug("Debug sample")
        sugar.info("Info sample")
        sugar.warn("Warn sample")
        sugar.error("Error sample")
        sugar.dpanic("DPanic sample")
        # SUCCESS is a loguru level outside the known set.
        handle.logger.log("SUCCESS", "Unknown level sample")


@app.command()
def write(
    message: Annotated[str, typer.Argument(help="Message to append")],
    path: Annotated[Path, typer.Option("--path", "-p", help="Log file to append to")],
    level: LevelOption = "info",
) -> None:
    """
    Append MESSAGE to a log file at the given level.
    """
    try:
        file_logger = new_file_logger(level, path)
    except Exception:
        logger.exception(f"Failed to open file logger at {path}")
        sys.exit(1)

    try:
        file_logger.log(level, message)
    finally:
        file_logger.close()


@app.command()
def version() -> None:
    """Print the version of coreason-tint."""
    typer.echo(f"coreason-tint v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
