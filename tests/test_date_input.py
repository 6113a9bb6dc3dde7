from datetime import date, datetime, timezone

import pytest

from mlbt.date_input import DateInput, DateParseError


def test_default_is_valid_and_empty():
    di = DateInput()
    assert di.is_valid is True
    assert di.text == ""


def test_valid_date_is_parsed_and_text_consumed():
    di = DateInput(text="2024-03-15")
    assert di.validate_input(timezone.utc) == date(2024, 3, 15)
    assert di.text == ""
    assert di.is_valid is True


@pytest.mark.parametrize("text", ["2024-13-01", "not a date", "", "2024/03/15"])
def test_invalid_input_raises_and_marks_invalid(text):
    di = DateInput(text=text)
    with pytest.raises(DateParseError):
        di.validate_input(timezone.utc)
    assert di.is_valid is False
    assert di.text == ""


def test_parse_error_is_value_error():
    di = DateInput(text="bad")
    with pytest.raises(ValueError):
        di.validate_input(timezone.utc)


@pytest.mark.parametrize("word", ["t", "today"])
def test_today_keywords(word):
    di = DateInput(is_valid=False, text=word)
    before = datetime.now(timezone.utc).date()
    result = di.validate_input(timezone.utc)
    after = datetime.now(timezone.utc).date()
    assert result in {before, after}
    assert di.is_valid is True
    assert di.text == ""


def test_valid_after_invalid_resets_flag():
    di = DateInput(text="nope")
    with pytest.raises(DateParseError):
        di.validate_input(timezone.utc)
    di.text = "2023-07-04"
    assert di.validate_input(timezone.utc) == date(2023, 7, 4)
    assert di.is_valid is True