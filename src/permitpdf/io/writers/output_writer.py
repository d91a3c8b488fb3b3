"""Writers for rendered PDFs and document definition dumps.

Parent directories are created automatically.  Content is written exactly as
provided.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

PathLikeStr = os.PathLike[str]


def write_bytes(path: str | PathLikeStr, data: Any) -> None:
    """Write binary ``data`` (a PDF) to ``path``."""

    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"expected bytes, got {type(data).__name__}")
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(data)


def write_json(path: str | PathLikeStr, data: Any, *, encoding: str = "utf-8") -> None:
    """Write ``data`` as indented JSON to ``path``."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding) as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.write("\n")


__all__ = ["write_bytes", "write_json"]
