"""Heading keys and fixed strings shared by the builder and the redactor."""

from __future__ import annotations

__all__ = [
    "PERMIT_HEADING",
    "CONTACT_NAME_HEADING",
    "PERMIT_HOLDER_TYPE_HEADING",
    "REQUIRED_HEADINGS",
    "ANSWER_SEPARATOR",
    "DOB_LABEL",
    "DOB_HEADING_SUFFIX",
    "PERMIT_HOLDER_HEADING",
    "PDF_CONTENT_TYPE",
]

PERMIT_HEADING: str = "section-permit-heading"
CONTACT_NAME_HEADING: str = "section-contact-name-heading"
PERMIT_HOLDER_TYPE_HEADING: str = "section-permit-holder-type-heading"

REQUIRED_HEADINGS: tuple[str, ...] = (
    PERMIT_HEADING,
    CONTACT_NAME_HEADING,
    PERMIT_HOLDER_TYPE_HEADING,
)

# Answers carrying a date of birth look like "Date of birth: 1 January 2019"
# or "Director Name: 1 January 2019".
ANSWER_SEPARATOR: str = ": "
DOB_LABEL: str = "Date of birth"
DOB_HEADING_SUFFIX: str = "birth"
PERMIT_HOLDER_HEADING: str = "Permit holder"

PDF_CONTENT_TYPE: str = "application/pdf"
