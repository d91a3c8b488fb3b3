"""Document definition tree and the builder producing it from sections."""

from .builder import DECLARATION_ITEMS, build_document, find_section
from .model import BulletList, DocumentDefinition, DocumentInfo, Table, Text, TextStyle

__all__ = [
    "DECLARATION_ITEMS",
    "BulletList",
    "DocumentDefinition",
    "DocumentInfo",
    "Table",
    "Text",
    "TextStyle",
    "build_document",
    "find_section",
]
