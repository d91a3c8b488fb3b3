"""Input records handed over by the forms framework.

The framework supplies plain mappings keyed in camelCase (``headingId``,
``answerId``, ``applicationNumber``).  They are validated into immutable
pydantic models so that the redaction and build steps can never mutate the
caller's data.  Models already constructed are passed through untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Answer",
    "Section",
    "Application",
    "PermitHolderType",
    "LIMITED_ENTITY_TYPES",
    "is_limited_entity",
    "coerce_sections",
    "coerce_application",
]


class PermitHolderType(str, Enum):
    """Permit holder types as stored in the permit-holder-type section."""

    INDIVIDUAL = "Individual"
    LIMITED_COMPANY = "Limited company"
    LIMITED_LIABILITY_PARTNERSHIP = "Limited liability partnership"


LIMITED_ENTITY_TYPES: frozenset[str] = frozenset(
    {
        PermitHolderType.LIMITED_COMPANY.value,
        PermitHolderType.LIMITED_LIABILITY_PARTNERSHIP.value,
    }
)


def is_limited_entity(permit_holder_type: object) -> bool:
    """Return ``True`` for a company or limited liability partnership."""

    if isinstance(permit_holder_type, PermitHolderType):
        permit_holder_type = permit_holder_type.value
    return isinstance(permit_holder_type, str) and permit_holder_type in LIMITED_ENTITY_TYPES


class Answer(BaseModel):
    """One submitted value within a section.

    ``answer`` is usually a string; structured values (mappings, lists) are
    kept as is.  Unknown keys from the framework are retained.
    """

    answer_id: Any = Field(default=None, alias="answerId")
    answer: Any = None

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    @property
    def is_text(self) -> bool:
        return isinstance(self.answer, str)


class Section(BaseModel):
    """One Q&A block of the application form keyed by ``heading_id``."""

    heading_id: str = Field(alias="headingId")
    heading: str = ""
    answers: tuple[Answer, ...] = ()
    links: Any = None

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    def text_answers(self) -> list[str]:
        """Return the string answers in order, skipping structured ones."""

        return [a.answer for a in self.answers if a.is_text]


class Application(BaseModel):
    """The persisted application the document is produced for."""

    application_number: str = Field(alias="applicationNumber")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


def coerce_sections(sections: Iterable[Section | Mapping[str, Any]]) -> list[Section]:
    """Validate ``sections`` into :class:`Section` models preserving order.

    Raises
    ------
    TypeError
        If ``sections`` is ``None`` or a bare string/mapping.
    pydantic.ValidationError
        If an entry does not match the section shape.
    """

    if sections is None or isinstance(sections, (str, bytes, Mapping)):
        raise TypeError("sections must be a sequence of section records")
    return [s if isinstance(s, Section) else Section.model_validate(s) for s in sections]


def coerce_application(application: Application | Mapping[str, Any]) -> Application:
    """Validate ``application`` into an :class:`Application` model."""

    if isinstance(application, Application):
        return application
    if application is None:
        raise TypeError("application is required")
    return Application.model_validate(application)
