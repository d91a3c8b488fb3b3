from datetime import datetime

from permitpdf.utils.datefmt import format_clock_time, format_creation_date, format_submitted_on


def test_creation_date_is_day_first() -> None:
    assert format_creation_date(datetime(2019, 3, 4, 9, 0)) == "04/03/2019"


def test_twelve_hour_clock() -> None:
    assert format_clock_time(datetime(2019, 1, 1, 0, 7)) == "12:07am"
    assert format_clock_time(datetime(2019, 1, 1, 9, 5)) == "9:05am"
    assert format_clock_time(datetime(2019, 1, 1, 12, 0)) == "12:00pm"
    assert format_clock_time(datetime(2019, 1, 1, 23, 59)) == "11:59pm"


def test_submitted_on_line() -> None:
    assert format_submitted_on(datetime(2019, 12, 25, 14, 15)) == (
        "Submitted on 25 Dec 2019 at 2:15pm"
    )
