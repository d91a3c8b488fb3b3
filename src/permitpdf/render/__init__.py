"""Render pipeline: typeset document definitions into PDF bytes or streams."""

from .fonts import FontRegistry
from .pipeline import PdfRenderer
from .typesetter import Typesetter

__all__ = ["FontRegistry", "PdfRenderer", "Typesetter"]
