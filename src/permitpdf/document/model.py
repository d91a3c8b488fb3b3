"""Engine independent document definition tree.

A :class:`DocumentDefinition` describes page setup, named text styles,
document information and an ordered list of content blocks.  Blocks are plain
frozen dataclasses; the typesetter in :mod:`permitpdf.render.typesetter` is
the only code that knows how to turn them into PDF.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

__all__ = [
    "TextStyle",
    "DocumentInfo",
    "Text",
    "BulletList",
    "Table",
    "Block",
    "Cell",
    "DocumentDefinition",
]

Margins = tuple[float, float, float, float]


@dataclass(slots=True, frozen=True)
class TextStyle:
    """Text attributes; ``None`` fields inherit from the default style.

    ``margin`` follows the left/top/right/bottom order used for page margins.
    """

    font: str | None = None
    font_size: float | None = None
    bold: bool | None = None
    line_height: float | None = None
    margin: Margins | None = None

    def merged_onto(self, base: "TextStyle") -> "TextStyle":
        """Return ``base`` overridden by the fields set on ``self``."""

        return TextStyle(
            font=self.font if self.font is not None else base.font,
            font_size=self.font_size if self.font_size is not None else base.font_size,
            bold=self.bold if self.bold is not None else base.bold,
            line_height=self.line_height if self.line_height is not None else base.line_height,
            margin=self.margin if self.margin is not None else base.margin,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.font is not None:
            out["font"] = self.font
        if self.font_size is not None:
            out["fontSize"] = self.font_size
        if self.bold is not None:
            out["bold"] = self.bold
        if self.line_height is not None:
            out["lineHeight"] = self.line_height
        if self.margin is not None:
            out["margin"] = list(self.margin)
        return out


@dataclass(slots=True, frozen=True)
class DocumentInfo:
    """Document information dictionary."""

    title: str
    author: str
    subject: str
    keywords: str
    creator: str
    producer: str
    creation_date: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "author": self.author,
            "subject": self.subject,
            "keywords": self.keywords,
            "creator": self.creator,
            "producer": self.producer,
            "creationDate": self.creation_date,
        }


@dataclass(slots=True, frozen=True)
class Text:
    """A paragraph of text; ``\\n`` starts a new line."""

    text: str
    style: str | None = None

    def to_dict(self) -> dict[str, Any] | str:
        if self.style is None:
            return self.text
        return {"text": self.text, "style": self.style}


@dataclass(slots=True, frozen=True)
class BulletList:
    """An unordered list of plain text items."""

    items: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"ul": list(self.items)}


# A table cell holds one block or a vertical stack of blocks.
Cell = Union[Text, BulletList, tuple[Union[Text, BulletList], ...]]


def _cell_to_dict(cell: Cell) -> Any:
    if isinstance(cell, tuple):
        return [part.to_dict() for part in cell]
    return cell.to_dict()


@dataclass(slots=True, frozen=True)
class Table:
    """A table whose body is a sequence of rows of cells."""

    body: tuple[tuple[Cell, ...], ...]
    header_rows: int = 0
    style: str | None = None
    layout: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "table": {
                "headerRows": self.header_rows,
                "body": [[_cell_to_dict(c) for c in row] for row in self.body],
            }
        }
        if self.style is not None:
            out["style"] = self.style
        if self.layout is not None:
            out["layout"] = self.layout
        return out


Block = Union[Text, BulletList, Table]


@dataclass(slots=True, frozen=True)
class DocumentDefinition:
    """Declarative description of a printable document."""

    page_size: str
    page_orientation: str
    page_margins: Margins
    default_style: TextStyle
    styles: Mapping[str, TextStyle]
    info: DocumentInfo
    content: tuple[Block, ...] = field(default_factory=tuple)

    def style(self, name: str | None) -> TextStyle:
        """Return the named style resolved against the default style."""

        if name is None:
            return self.default_style
        return self.styles[name].merged_onto(self.default_style)

    @property
    def tables(self) -> list[Table]:
        return [b for b in self.content if isinstance(b, Table)]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON friendly mapping of the whole tree."""

        return {
            "pageSize": self.page_size,
            "pageOrientation": self.page_orientation,
            "pageMargins": list(self.page_margins),
            "defaultStyle": self.default_style.to_dict(),
            "styles": {name: s.to_dict() for name, s in self.styles.items()},
            "info": self.info.to_dict(),
            "content": [block.to_dict() for block in self.content],
        }
