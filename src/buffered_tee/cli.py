"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from .config import TeeConfig, load_tee_config, resolve_config
from .exceptions import TeeError
from .logging_utils import get_logger, scoped_log_level
from .pipelines.buffered import BufferedTeePipeline
from .progress import DEFAULT_TICK_INTERVAL
from .status import StatusStream

app = typer.Typer(
    add_completion=False,
    help="Buffered tee: merge, sort, deduplicate and fan out line-oriented text",
    context_settings={"help_option_names": ["-h", "--help"]},
)
status = StatusStream()
logger = get_logger("CLI")


def _load_file_options(config_path: Optional[Path]) -> Dict[str, Any]:
    if config_path is None:
        return {}
    try:
        return load_tee_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _build_config(
    file_options: Dict[str, Any],
    infiles: Optional[List[str]],
    outfiles: Optional[List[str]],
    progress: bool,
    append: bool,
    quiet: bool,
    unique: bool,
    sort: bool,
    cleanup: bool,
    redux: Optional[int],
) -> TeeConfig:
    try:
        return resolve_config(
            infiles or file_options.get("inputs", ()),
            outfiles or file_options.get("outputs", ()),
            show_progress=progress or file_options.get("show_progress", False),
            append=append or file_options.get("append", False),
            quiet=quiet,
            unique=unique or file_options.get("unique", False),
            sort=sort or file_options.get("sort", False),
            cleanup=cleanup or file_options.get("cleanup", False),
            redux=redux if redux is not None else file_options.get("redux"),
            tick_interval=file_options.get("tick_interval", DEFAULT_TICK_INTERVAL),
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def tee(
    infiles: Optional[List[str]] = typer.Option(
        None, "--infile", "-i", help="Input file; '-' or '.' reads STDIN. Repeatable."
    ),
    outfiles: Optional[List[str]] = typer.Option(
        None, "--outfile", "-o", help="Output file; '-' or '.' writes STDOUT. Repeatable."
    ),
    progress: bool = typer.Option(
        False, "--progress", "-p", help="Show progress dots and stage notices on stderr"
    ),
    append: bool = typer.Option(
        False, "--append", "-a", help="Append to output files instead of truncating"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="No status output; fatal errors are still shown"
    ),
    unique: bool = typer.Option(
        False, "--unique", "-u", help="Drop duplicate lines; implies --sort"
    ),
    sort: bool = typer.Option(False, "--sort", "-s", help="Sort lines byte-wise"),
    cleanup: bool = typer.Option(
        False, "--cleanup", "-c", help="Replace non-printable bytes in echoed lines with '.'"
    ),
    redux: Optional[int] = typer.Option(
        None,
        "--redux",
        "-r",
        min=0,
        help="Reduced stderr progress noise: 1 status output for each N lines",
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="YAML file with defaults for any of these options"
    ),
) -> None:
    file_options = _load_file_options(config_path)
    quiet = quiet or file_options.get("quiet", False)

    # Defaulting warnings are shown even in quiet mode; only the run is silenced.
    config = _build_config(
        file_options, infiles, outfiles, progress, append, quiet, unique, sort, cleanup, redux
    )
    pipeline = BufferedTeePipeline(config, status)
    with scoped_log_level(logging.ERROR if quiet else logging.INFO):
        try:
            pipeline.run()
        except TeeError as exc:
            status.error(str(exc))
            raise typer.Exit(code=1) from exc


def run() -> None:
    app()


if __name__ == "__main__":
    run()
