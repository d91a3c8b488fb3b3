"""Payload input and rendered output, dispatched on file extension.

Section and application payloads are read from ``.json``, ``.yml`` or
``.yaml`` files.  Rendered PDFs are written to ``.pdf`` and document
definition dumps to ``.json``.  Anything else raises
:class:`~permitpdf.utils.errors.UnsupportedFormatError`.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from ..utils.errors import UnsupportedFormatError
from .readers.payload_reader import read_json, read_yaml
from .writers.output_writer import write_bytes, write_json

PathArg = str | os.PathLike[str]

PAYLOAD_READERS: Mapping[str, Callable[[PathArg], Any]] = {
    ".json": read_json,
    ".yml": read_yaml,
    ".yaml": read_yaml,
}
OUTPUT_WRITERS: Mapping[str, Callable[[PathArg, Any], None]] = {
    ".pdf": write_bytes,
    ".json": write_json,
}


def get_extension(path: PathArg) -> str:
    """Return the lower-cased extension of ``path`` with its dot, or ``""``."""

    return Path(path).suffix.lower()


def read_file(path: PathArg) -> Any:
    """Decode the payload stored at ``path``."""

    ext = get_extension(path)
    if ext not in PAYLOAD_READERS:
        raise UnsupportedFormatError(f"Cannot read payloads from '{ext}' files: {path}")
    return PAYLOAD_READERS[ext](path)


def write_file(path: PathArg, data: Any) -> None:
    """Persist ``data`` (PDF bytes or a JSON-compatible value) to ``path``."""

    ext = get_extension(path)
    if ext not in OUTPUT_WRITERS:
        raise UnsupportedFormatError(f"Cannot write output to '{ext}' files: {path}")
    OUTPUT_WRITERS[ext](path, data)


__all__ = [
    "OUTPUT_WRITERS",
    "PAYLOAD_READERS",
    "get_extension",
    "read_file",
    "write_file",
]
