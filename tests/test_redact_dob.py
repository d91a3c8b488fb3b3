from permitpdf.models import Answer
from permitpdf.redact.dob import cleanse_dob_answer, cleanse_dob_answers


def test_strips_day_from_date_of_birth() -> None:
    item = Answer(answer_id="dob", answer="Date of birth: 3 March 1990")
    out = cleanse_dob_answer(item)
    assert out.answer == "Date of birth: March 1990"
    assert out.answer_id == "dob"


def test_target_label_mismatch_left_alone() -> None:
    item = Answer(answer_id="name", answer="Director Name: 3 March 1990")
    assert cleanse_dob_answer(item, "Date of birth") is item


def test_no_label_filter_cleanses_any_label() -> None:
    item = Answer(answer_id="name", answer="Director Name: 3 March 1990")
    assert cleanse_dob_answer(item).answer == "Director Name: March 1990"


def test_non_string_answers_pass_through() -> None:
    item = Answer(answer_id="addr", answer={"line1": "1 High Street: 3 March"})
    assert cleanse_dob_answer(item) is item
    empty = Answer(answer_id="none")
    assert cleanse_dob_answer(empty) is empty


def test_answer_without_separator_unchanged() -> None:
    item = Answer(answer_id="x", answer="3 March 1990")
    assert cleanse_dob_answer(item) is item
    colon_only = Answer(answer_id="y", answer="Date of birth:3 March 1990")
    assert cleanse_dob_answer(colon_only) is colon_only


def test_leading_punctuation_and_padding_removed() -> None:
    item = Answer(answer_id="dob", answer="Date of birth: 31 - December 1975")
    assert cleanse_dob_answer(item).answer == "Date of birth: December 1975"


def test_numeric_only_date_is_emptied() -> None:
    item = Answer(answer_id="dob", answer="Date of birth: 03/03/1990")
    assert cleanse_dob_answer(item).answer == "Date of birth: "


def test_splits_on_first_separator_only() -> None:
    item = Answer(answer_id="dob", answer="Date of birth: 3 March: 1990")
    assert cleanse_dob_answer(item, "Date of birth").answer == "Date of birth: March: 1990"


def test_cleansed_answer_drops_extra_fields() -> None:
    item = Answer.model_validate(
        {"answerId": "dob", "answer": "Date of birth: 1 May 1980", "hint": "dd/mm/yyyy"}
    )
    assert item.model_extra == {"hint": "dd/mm/yyyy"}
    out = cleanse_dob_answer(item)
    assert out.answer_id == "dob"
    assert out.answer == "Date of birth: May 1980"
    assert not out.model_extra


def test_cleanse_many_preserves_order() -> None:
    answers = [
        Answer(answer_id="1", answer="Director Name: 1 January 2019"),
        Answer(answer_id="2", answer={"nested": True}),
        Answer(answer_id="3", answer="Date of birth: 12 June 1970"),
    ]
    out = cleanse_dob_answers(answers)
    assert [a.answer_id for a in out] == ["1", "2", "3"]
    assert out[0].answer == "Director Name: January 2019"
    assert out[1] is answers[1]
    assert out[2].answer == "Date of birth: June 1970"
    assert cleanse_dob_answers([]) == ()


def test_numeric_answer_id_survives_cleansing() -> None:
    item = Answer.model_validate({"answerId": 7, "answer": "Date of birth: 3 March 1990"})
    out = cleanse_dob_answer(item)
    assert out.answer_id == 7
    assert out.answer == "Date of birth: March 1990"
