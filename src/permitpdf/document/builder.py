"""Build the application document definition from answer sections.

The document opens with the title, the application reference, the submission
time and a disclaimer, followed by a two column table with one row per
section (heading, then its text answers one per line) and a closing
declaration row that is the same for every application.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any

from permitpdf.config import ConfigModel, load_config
from permitpdf.models import (
    Application,
    Section,
    coerce_application,
    coerce_sections,
)
from permitpdf.redact import redact_sections
from permitpdf.utils.constants import (
    CONTACT_NAME_HEADING,
    PERMIT_HEADING,
    PERMIT_HOLDER_TYPE_HEADING,
)
from permitpdf.utils.datefmt import format_creation_date, format_submitted_on
from permitpdf.utils.errors import MissingSectionError
from permitpdf.utils.logging import get_logger

from .model import (
    BulletList,
    Cell,
    DocumentDefinition,
    DocumentInfo,
    Table,
    Text,
    TextStyle,
)

__all__ = [
    "DECLARATION_ITEMS",
    "DECLARATION_ROW",
    "DISCLAIMER",
    "TITLE_PREFIX",
    "build_document",
    "find_section",
    "first_answer",
]

log = get_logger(__name__)

TITLE_PREFIX = "Application for "
DISCLAIMER = (
    "This is the information submitted by the applicant. It has not been checked or duly made."
)

DECLARATION_ITEMS: tuple[str, ...] = (
    "their operation meets the standard rules",
    "a written management system will be in place before they start operating",
    "they were authorised to apply for the permit by the organisation or individual responsible",
    "the information they gave was true",
)

DECLARATION_ROW: tuple[Cell, ...] = (
    Text("Declaration", style="th"),
    (
        Text("The operator confirmed that:", style="td"),
        BulletList(DECLARATION_ITEMS),
    ),
)

DEFAULT_STYLE = TextStyle(font_size=12, bold=False, line_height=1.35, margin=(0, 0, 0, 6))

STYLES: Mapping[str, TextStyle] = {
    "h1": TextStyle(font_size=17, bold=True, margin=(0, 0, 0, 12)),
    "h2": TextStyle(font_size=14, bold=True, margin=(0, 12, 0, 6)),
    "tableApplication": TextStyle(margin=(0, 12, 0, 12)),
    "th": TextStyle(bold=True, margin=(0, 3, 0, 3)),
    "td": TextStyle(margin=(0, 3, 0, 3)),
}


def find_section(sections: Iterable[Section], heading_id: str) -> Section:
    """Return the first section keyed ``heading_id``.

    Raises
    ------
    MissingSectionError
        If no section carries ``heading_id``.
    """

    for section in sections:
        if section.heading_id == heading_id:
            return section
    raise MissingSectionError(heading_id)


def first_answer(sections: Iterable[Section], heading_id: str) -> Any:
    """Return the first answer value of the section keyed ``heading_id``."""

    answers = find_section(sections, heading_id).answers
    return answers[0].answer if answers else None


def _section_row(section: Section) -> tuple[Cell, ...]:
    return (
        Text(section.heading, style="th"),
        Text("\n".join(section.text_answers()), style="td"),
    )


def build_document(
    sections: Sequence[Section | Mapping[str, Any]],
    application: Application | Mapping[str, Any],
    *,
    now: datetime,
    config: ConfigModel | None = None,
) -> DocumentDefinition:
    """Return the document definition for ``application``.

    Parameters
    ----------
    sections:
        Answer sections in display order, as models or framework mappings.
    application:
        The application the document is produced for.
    now:
        Submission timestamp printed in the document and its information
        dictionary.
    config:
        Page and metadata settings; package defaults when omitted.

    Raises
    ------
    MissingSectionError
        If the permit, contact name or permit holder type section is absent.
    """

    cfg = config if config is not None else load_config()
    section_list = coerce_sections(sections)
    app = coerce_application(application)

    permit_heading = " ".join(find_section(section_list, PERMIT_HEADING).text_answers())
    author = " ".join(find_section(section_list, CONTACT_NAME_HEADING).text_answers())
    permit_holder_type = first_answer(section_list, PERMIT_HOLDER_TYPE_HEADING)

    cleansed = redact_sections(section_list, permit_holder_type)
    body = tuple(_section_row(s) for s in cleansed) + (DECLARATION_ROW,)
    log.debug("Built %d table rows for application %s", len(body), app.application_number)

    title = TITLE_PREFIX + permit_heading
    meta = cfg.metadata
    info = DocumentInfo(
        title=title,
        author=author,
        subject=meta.subject,
        keywords=meta.keywords,
        creator=meta.creator,
        producer=meta.producer,
        creation_date=format_creation_date(now),
    )

    return DocumentDefinition(
        page_size=cfg.page.size,
        page_orientation=cfg.page.orientation,
        page_margins=cfg.page.margins,
        default_style=replace(DEFAULT_STYLE, font=cfg.fonts.default_family),
        styles=dict(STYLES),
        info=info,
        content=(
            Text(title, style="h1"),
            Text(f"Application reference: {app.application_number}"),
            Text(format_submitted_on(now)),
            Text(DISCLAIMER),
            Table(
                body=body,
                header_rows=0,
                style="tableApplication",
                layout="lightHorizontalLines",
            ),
        ),
    )
