"""Turn a :class:`DocumentDefinition` into PDF bytes with reportlab platypus."""

from __future__ import annotations

from typing import BinaryIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, LETTER, landscape, portrait
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, ListFlowable, ListItem, Paragraph, SimpleDocTemplate
from reportlab.platypus import Table as RLTable
from reportlab.platypus import TableStyle

from permitpdf.document.model import (
    Block,
    BulletList,
    Cell,
    DocumentDefinition,
    Table,
    Text,
)

from .fonts import FontRegistry

__all__ = ["Typesetter", "TABLE_LAYOUTS"]

_PAGE_SIZES = {"A4": A4, "LETTER": LETTER}

_LINE_GREY = colors.HexColor("#aaaaaa")

# Horizontal rules between rows, no vertical rules, no outer padding.
TABLE_LAYOUTS: dict[str, list[tuple]] = {
    "lightHorizontalLines": [
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (0, -1), 0),
        ("RIGHTPADDING", (-1, 0), (-1, -1), 0),
        ("LINEBELOW", (0, 0), (-1, -2), 0.5, _LINE_GREY),
    ],
    "noBorders": [
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ],
}

# Share of the frame width given to the heading column.
_HEADING_COLUMN = 0.35


def _markup(text: str) -> str:
    return escape(text).replace("\n", "<br/>")


class Typesetter:
    """Lay out document definitions on pages and write the PDF."""

    def __init__(self, fonts: FontRegistry, *, invariant: bool = False) -> None:
        self.fonts = fonts
        self.invariant = invariant

    def paragraph_style(self, definition: DocumentDefinition, name: str | None) -> ParagraphStyle:
        style = definition.style(name)
        size = style.font_size or 12
        margin = style.margin or (0, 0, 0, 0)
        return ParagraphStyle(
            name=name or "default",
            fontName=self.fonts.face(style.font, bold=bool(style.bold)),
            fontSize=size,
            leading=size * (style.line_height or 1.2),
            leftIndent=margin[0],
            spaceBefore=margin[1],
            rightIndent=margin[2],
            spaceAfter=margin[3],
        )

    def _text(self, definition: DocumentDefinition, block: Text) -> Paragraph:
        return Paragraph(_markup(block.text), self.paragraph_style(definition, block.style))

    def _bullets(self, definition: DocumentDefinition, block: BulletList) -> ListFlowable:
        style = self.paragraph_style(definition, None)
        return ListFlowable(
            [ListItem(Paragraph(_markup(item), style)) for item in block.items],
            bulletType="bullet",
            start="•",
            leftIndent=12,
            bulletFontName=self.fonts.face(),
            bulletFontSize=style.fontSize,
        )

    def _cell(self, definition: DocumentDefinition, cell: Cell) -> list[Flowable]:
        parts = cell if isinstance(cell, tuple) else (cell,)
        return [self._block(definition, part, frame_width=0.0) for part in parts]

    def _table(self, definition: DocumentDefinition, block: Table, frame_width: float) -> RLTable:
        data = [[self._cell(definition, cell) for cell in row] for row in block.body]
        margin = definition.style(block.style).margin if block.style else None
        col_widths = None
        if block.body and len(block.body[0]) == 2 and frame_width > 0:
            col_widths = [frame_width * _HEADING_COLUMN, frame_width * (1 - _HEADING_COLUMN)]
        return RLTable(
            data,
            colWidths=col_widths,
            style=TableStyle(TABLE_LAYOUTS[block.layout or "noBorders"]),
            repeatRows=block.header_rows,
            splitInRow=1,
            spaceBefore=margin[1] if margin else None,
            spaceAfter=margin[3] if margin else None,
        )

    def _block(self, definition: DocumentDefinition, block: Block, frame_width: float) -> Flowable:
        if isinstance(block, Text):
            return self._text(definition, block)
        if isinstance(block, BulletList):
            return self._bullets(definition, block)
        if isinstance(block, Table):
            return self._table(definition, block, frame_width)
        raise TypeError(f"unsupported content block: {type(block).__name__}")

    def page_size(self, definition: DocumentDefinition) -> tuple[float, float]:
        size = _PAGE_SIZES[definition.page_size]
        return landscape(size) if definition.page_orientation == "landscape" else portrait(size)

    def flowables(self, definition: DocumentDefinition) -> list[Flowable]:
        """Return the platypus flowables for the definition's content."""

        left, _, right, _ = definition.page_margins
        frame_width = self.page_size(definition)[0] - left - right
        return [self._block(definition, block, frame_width) for block in definition.content]

    def typeset(self, definition: DocumentDefinition, destination: BinaryIO) -> None:
        """Write the PDF for ``definition`` into the binary file ``destination``."""

        left, top, right, bottom = definition.page_margins
        info = definition.info
        doc = SimpleDocTemplate(
            destination,
            pagesize=self.page_size(definition),
            leftMargin=left,
            topMargin=top,
            rightMargin=right,
            bottomMargin=bottom,
            title=info.title,
            author=info.author,
            subject=info.subject,
            keywords=info.keywords,
            creator=info.creator,
            producer=info.producer,
            invariant=1 if self.invariant else None,
        )
        doc.build(self.flowables(definition))
