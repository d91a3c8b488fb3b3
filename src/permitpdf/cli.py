"""Typer-based command line interface for previewing application PDFs.

The web layer calls :class:`~permitpdf.render.PdfRenderer` directly; this CLI
exists so that a developer can render a document from exported section and
application payloads (``.json``/``.yml``) without running the web service.

Exit codes
----------
0 success
3 I/O error (missing reader/writer, filesystem issues, malformed payload)
4 configuration error
5 render failure
"""

from __future__ import annotations

import json
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
import yaml

from .config import ConfigModel, load_config
from .io import get_extension, read_file, write_file
from .render import PdfRenderer
from .utils.errors import IOFormatError, PdfRenderError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="permitpdf",
    help="Render permit application PDFs from exported answer sections.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load_config(config_path: Path | None, verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except Exception as exc:  # pragma: no cover - diverse
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("INFO" if verbose else cfg.logging.level)
    return cfg


def _read_payloads(sections_path: Path, application_path: Path) -> tuple[list[Any], Any]:
    try:
        sections = read_file(sections_path)
        application = read_file(application_path)
        if not isinstance(sections, list):
            raise IOFormatError(f"{sections_path}: expected a list of sections")
        if not isinstance(application, dict):
            raise IOFormatError(f"{application_path}: expected an application mapping")
    except (OSError, IOFormatError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(3, str(exc))
    return sections, application


def _check_output(out_path: Path, expected: str) -> None:
    ext = get_extension(out_path)
    if ext != expected:
        _safe_exit(3, f"Unsupported output extension: '{ext}' (expected {expected})")


def _parse_timestamp(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        _safe_exit(3, f"Invalid --submitted-at timestamp: {value}")
    return None


@app.callback()
def main() -> None:
    """Entry point for the permitpdf command group."""
    pass


@app.command()
def render(  # noqa: PLR0913
    sections_path: Path = typer.Option(  # noqa: B008
        ..., "--sections", help="Answer sections payload (.json/.yml)"
    ),
    application_path: Path = typer.Option(  # noqa: B008
        ..., "--application", help="Application payload (.json/.yml)"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output file (.pdf)"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    submitted_at: Optional[str] = typer.Option(  # noqa: B008
        None, "--submitted-at", help="ISO timestamp printed as the submission time"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Render the application PDF to ``out_path``."""

    _check_output(out_path, ".pdf")
    cfg = _load_config(config_path, verbose)
    sections, application = _read_payloads(sections_path, application_path)
    now = _parse_timestamp(submitted_at)

    renderer = PdfRenderer(cfg)
    try:
        data = renderer.render_to_buffer(sections, application, now=now)
    except PdfRenderError as exc:
        msg = str(exc)
        if verbose and exc.__cause__ is not None:
            msg = f"{msg}: {type(exc.__cause__).__name__}: {exc.__cause__}"
        _safe_exit(5, msg)

    try:
        write_file(out_path, data)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Wrote {len(data)} bytes to {out_path}", err=True)


@app.command()
def definition(
    sections_path: Path = typer.Option(  # noqa: B008
        ..., "--sections", help="Answer sections payload (.json/.yml)"
    ),
    application_path: Path = typer.Option(  # noqa: B008
        ..., "--application", help="Application payload (.json/.yml)"
    ),
    out_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--out", help="Write the definition to this .json file instead of stdout"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    submitted_at: Optional[str] = typer.Option(  # noqa: B008
        None, "--submitted-at", help="ISO timestamp printed as the submission time"
    ),
) -> None:
    """Print the redacted document definition as JSON."""

    if out_path is not None:
        _check_output(out_path, ".json")
    cfg = _load_config(config_path, False)
    sections, application = _read_payloads(sections_path, application_path)
    now = _parse_timestamp(submitted_at)

    try:
        doc = PdfRenderer(cfg).definition(sections, application, now=now)
    except Exception as exc:
        _safe_exit(5, f"{type(exc).__name__}: {exc}")

    if out_path is None:
        typer.echo(json.dumps(doc.to_dict(), ensure_ascii=False, indent=2))
        return
    try:
        write_file(out_path, doc.to_dict())
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
