"""JSON and YAML payload readers.

Payloads are the section list and the application record exported from the
forms framework.  Both readers return plain Python data; shape validation is
left to :mod:`permitpdf.models`.  ``FileNotFoundError`` and parser errors
propagate to the caller.
"""

from __future__ import annotations

import json
import os
from typing import Any

import yaml

PathLikeStr = os.PathLike[str]


def read_json(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> Any:
    """Load a JSON document; a UTF-8 BOM is consumed when present."""

    with open(path, "r", encoding=encoding) as f:
        return json.load(f)


def read_yaml(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> Any:
    """Load a YAML document with ``yaml.safe_load``."""

    with open(path, "r", encoding=encoding) as f:
        return yaml.safe_load(f)


__all__ = ["read_json", "read_yaml"]
