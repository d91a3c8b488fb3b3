"""Strip the day of the month from date-of-birth answers.

Dates of birth reach the document in one of two shapes::

    Date of birth: 1 January 2019
    Director Name: 1 January 2019

Everything after the ``": "`` separator is cut back to its first letter, so
``"Date of birth: 1 January 2019"`` becomes ``"Date of birth: January 2019"``.
When no letter follows the separator nothing of the value is kept.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from permitpdf.models import Answer
from permitpdf.utils.constants import ANSWER_SEPARATOR
from permitpdf.utils.logging import get_logger

__all__ = ["cleanse_dob_answer", "cleanse_dob_answers"]

log = get_logger(__name__)

_RX_FROM_FIRST_LETTER = re.compile(r"[A-Za-z].*", re.DOTALL)


def _strip_day(rest: str) -> str:
    m = _RX_FROM_FIRST_LETTER.search(rest)
    return m.group() if m else ""


def cleanse_dob_answer(item: Answer, target_label: str | None = None) -> Answer:
    """Return ``item`` with the leading day token removed from its value.

    ``item`` is returned unchanged when its answer is not a string, has no
    ``": "`` separator, or its label differs from ``target_label``.  A
    cleansed answer carries only ``answer_id`` and ``answer``.
    """

    if not isinstance(item.answer, str) or ANSWER_SEPARATOR not in item.answer:
        return item

    label, _, rest = item.answer.partition(ANSWER_SEPARATOR)
    if target_label is not None and label != target_label:
        return item

    if item.model_extra:
        log.debug("Dropping fields %s from cleansed answer", sorted(item.model_extra))
    return Answer(answer_id=item.answer_id, answer=f"{label}{ANSWER_SEPARATOR}{_strip_day(rest)}")


def cleanse_dob_answers(
    answers: Iterable[Answer], target_label: str | None = None
) -> tuple[Answer, ...]:
    """Apply :func:`cleanse_dob_answer` to every answer preserving order."""

    return tuple(cleanse_dob_answer(a, target_label) for a in answers)
