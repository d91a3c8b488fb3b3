"""Date-of-birth redaction for answer sections.

``redact_sections`` walks the sections through an ordered rule table keyed on
the permit holder type and the section heading; matching sections have the
day of birth stripped from their answers by :mod:`permitpdf.redact.dob`.
"""

from .dob import cleanse_dob_answer, cleanse_dob_answers
from .rules import DEFAULT_RULES, RedactionRule, redact_sections, select_rule

__all__ = [
    "DEFAULT_RULES",
    "RedactionRule",
    "cleanse_dob_answer",
    "cleanse_dob_answers",
    "redact_sections",
    "select_rule",
]
