"""Ordered rule table selecting how each section is redacted.

Rules are evaluated top to bottom and the first whose predicate matches
decides the section's fate:

1. limited entity holder, heading ending in ``birth``: cleanse every answer;
2. any other holder, heading ``Permit holder``: cleanse ``Date of birth``
   answers only;
3. anything else: leave the section alone.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from permitpdf.models import Section, is_limited_entity
from permitpdf.utils.constants import DOB_HEADING_SUFFIX, DOB_LABEL, PERMIT_HOLDER_HEADING

from .dob import cleanse_dob_answers

__all__ = ["RedactionRule", "DEFAULT_RULES", "select_rule", "redact_sections"]

Predicate = Callable[[Section, object], bool]


@dataclass(slots=True, frozen=True)
class RedactionRule:
    """A predicate over ``(section, permit_holder_type)`` and its action.

    ``cleanse`` set to ``False`` marks a pass-through rule.  ``target_label``
    restricts cleansing to answers with that label.
    """

    name: str
    applies: Predicate
    cleanse: bool = True
    target_label: str | None = None

    def apply(self, section: Section) -> Section:
        if not self.cleanse:
            return section
        answers = cleanse_dob_answers(section.answers, self.target_label)
        return section.model_copy(update={"answers": answers})


def _limited_entity_birth_heading(section: Section, permit_holder_type: object) -> bool:
    return is_limited_entity(permit_holder_type) and section.heading[-5:] == DOB_HEADING_SUFFIX


def _individual_permit_holder(section: Section, permit_holder_type: object) -> bool:
    return not is_limited_entity(permit_holder_type) and section.heading == PERMIT_HOLDER_HEADING


DEFAULT_RULES: tuple[RedactionRule, ...] = (
    RedactionRule("limited_entity_dob", _limited_entity_birth_heading),
    RedactionRule("permit_holder_dob", _individual_permit_holder, target_label=DOB_LABEL),
    RedactionRule("passthrough", lambda section, permit_holder_type: True, cleanse=False),
)


def select_rule(
    section: Section,
    permit_holder_type: object,
    rules: Sequence[RedactionRule] = DEFAULT_RULES,
) -> RedactionRule | None:
    """Return the first rule in ``rules`` applying to ``section``."""

    for rule in rules:
        if rule.applies(section, permit_holder_type):
            return rule
    return None


def redact_sections(
    sections: Iterable[Section],
    permit_holder_type: object,
    rules: Sequence[RedactionRule] = DEFAULT_RULES,
) -> list[Section]:
    """Return a new list of sections with dates of birth cleansed.

    The input is never mutated; sections no rule cleanses are returned as the
    same objects.
    """

    out: list[Section] = []
    for section in sections:
        rule = select_rule(section, permit_holder_type, rules)
        out.append(section if rule is None else rule.apply(section))
    return out
