import pytest
from pydantic import ValidationError

from permitpdf.models import (
    Application,
    PermitHolderType,
    Section,
    coerce_application,
    coerce_sections,
    is_limited_entity,
)


def test_coerce_sections_from_framework_mappings() -> None:
    raw = [
        {"headingId": "section-permit-heading", "answers": [{"answer": "test heading"}]},
        {
            "headingId": "section-contact-name-heading",
            "heading": "Contact",
            "answers": [{"answerId": "contact-name", "answer": "contact name"}],
            "links": [{"path": "/contact-details"}],
        },
    ]
    sections = coerce_sections(raw)
    assert [s.heading_id for s in sections] == [
        "section-permit-heading",
        "section-contact-name-heading",
    ]
    assert sections[0].heading == ""
    assert sections[0].answers[0].answer_id is None
    assert sections[1].answers[0].answer_id == "contact-name"
    assert sections[1].links == [{"path": "/contact-details"}]


def test_coerce_sections_passes_models_through() -> None:
    section = Section(heading_id="a")
    assert coerce_sections([section])[0] is section


def test_coerce_sections_rejects_missing_input() -> None:
    with pytest.raises(TypeError):
        coerce_sections(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        coerce_sections({"headingId": "a"})  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        coerce_sections([{"heading": "no id"}])


def test_text_answers_skip_structured_values() -> None:
    section = Section.model_validate(
        {
            "headingId": "x",
            "answers": [
                {"answer": "one"},
                {"answer": {"postcode": "BS1 5AH"}},
                {"answer": ["a", "b"]},
                {"answer": "two"},
            ],
        }
    )
    assert section.text_answers() == ["one", "two"]


def test_models_are_frozen() -> None:
    section = Section(heading_id="x", heading="Permit holder")
    with pytest.raises(ValidationError):
        section.heading = "changed"  # type: ignore[misc]


def test_application_coercion() -> None:
    app = coerce_application({"applicationNumber": "EPR/AB1234CD/A001", "id": "ignored"})
    assert app.application_number == "EPR/AB1234CD/A001"
    assert coerce_application(app) is app
    with pytest.raises(TypeError):
        coerce_application(None)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        coerce_application({})
    assert Application(application_number="1").application_number == "1"


def test_limited_entity_membership() -> None:
    assert is_limited_entity(PermitHolderType.LIMITED_COMPANY)
    assert is_limited_entity("Limited liability partnership")
    assert not is_limited_entity(PermitHolderType.INDIVIDUAL)
    assert not is_limited_entity("limited company")
    assert not is_limited_entity(None)
    assert not is_limited_entity({"type": "Limited company"})
