"""Typer-based command line interface.

``boldextract run PATH`` prints the bold text of a ``.docx`` document to
standard output.  Errors are reported on standard error and no partial output
is written.

Exit codes
----------
0 success
3 input error (missing file, wrong extension)
4 configuration error
5 document error (unreadable archive, missing entry, malformed XML)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .parser import parse_with_config
from .utils.errors import DocumentError, InvalidExtensionError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="boldextract",
    help="Use 'boldextract run PATH' to print the bold text of a .docx file.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    scheme: str | None,
    strategy: str | None,
) -> ConfigModel:
    """Return a validated copy of ``cfg`` with CLI overrides applied."""

    data = cfg.model_dump()
    if scheme is not None:
        data["output"]["scheme"] = scheme
    if strategy is not None:
        data["extraction"]["strategy"] = strategy
    return ConfigModel.model_validate(data)


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


@app.callback()
def main() -> None:
    """Entry point for the boldextract command group."""
    pass


@app.command()
def run(
    path: Path = typer.Argument(..., help="Input .docx file"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    scheme: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--format",
        help="Result format: 'sep_string' wraps and joins; any other value prints one fragment per line",
    ),
    strategy: Optional[str] = typer.Option(  # noqa: B008
        None, "--strategy", help="Bold matching strategy [pattern|structural]"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Print the bold text runs of ``path``."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
        cfg = _apply_overrides(cfg, scheme=scheme, strategy=strategy)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo(
            f"Loaded config (strategy={cfg.extraction.strategy}, format={cfg.output.scheme})",
            err=True,
        )

    try:
        with Timing() as t_parse:
            result = parse_with_config(path, cfg)
    except (FileNotFoundError, InvalidExtensionError) as exc:
        _safe_exit(3, str(exc))
    except DocumentError as exc:
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        typer.echo(f"Parsed {path} in {t_parse.ms:.1f} ms", err=True)

    if isinstance(result, str):
        typer.echo(result, nl=False)
    else:
        for fragment in result:
            typer.echo(fragment)


__all__ = ["app", "main", "run"]
