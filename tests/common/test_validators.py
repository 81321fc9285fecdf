from datetime import datetime

import pytest

from session_roster.common.datetime_utils import (
    format_session_datetime,
    is_valid_date_format,
    is_valid_date_time_format,
    is_valid_time_format,
    parse_session_datetime,
)
from session_roster.common.validators import (
    is_valid_email,
    is_valid_location,
    is_valid_name,
    is_valid_pay_rate,
    is_valid_phone,
    is_valid_tag_name,
)
from session_roster.core.exceptions import InvalidFormatError


@pytest.mark.parametrize("value", ["Alice", "Alice Tan", "Room 101", "a"])
def test_valid_names(value):
    assert is_valid_name(value)


@pytest.mark.parametrize("value", ["", " ", " Alice", "Alice-Tan", "_x", None, 5])
def test_invalid_names(value):
    assert not is_valid_name(value)


def test_location_must_not_start_with_space():
    assert is_valid_location("Room 1, Level 2")
    assert not is_valid_location("")
    assert not is_valid_location("\tGym")


def test_phone_email_tag_and_rate():
    assert is_valid_phone("911")
    assert not is_valid_phone("91")
    assert is_valid_email("alice.tan@example.com")
    assert not is_valid_email("alice@")
    assert is_valid_tag_name("tutor2")
    assert not is_valid_tag_name("")
    assert is_valid_pay_rate(0)
    assert not is_valid_pay_rate(False)


def test_parse_and_format_session_datetime():
    parsed = parse_session_datetime("29-02-2024 23:59")

    assert parsed == datetime(2024, 2, 29, 23, 59)
    assert format_session_datetime(parsed) == "29-02-2024 23:59"


@pytest.mark.parametrize("value", ["29-02-2023 10:00", "01-13-2024 10:00", "01-01-2024 24:00", "01/01/2024 10:00"])
def test_parse_rejects_impossible_or_misshapen(value):
    with pytest.raises(InvalidFormatError):
        parse_session_datetime(value)


def test_format_checks():
    assert is_valid_date_time_format("01-01-2024 10:00")
    assert not is_valid_date_time_format("01-01-2024")
    assert is_valid_date_format("31-12-2024")
    assert not is_valid_date_format("31-12-24")
    assert is_valid_time_format("09:05")
    assert not is_valid_time_format("9:05")
    assert not is_valid_time_format(None)


@pytest.mark.parametrize("value", ["Café", "Αlpha", "Room ١"])
def test_names_are_ascii_alphanumeric(value):
    assert not is_valid_name(value)


def test_tags_and_phones_are_ascii():
    assert not is_valid_tag_name("café")
    assert not is_valid_phone("12٣")


def test_non_ascii_digits_fail_format_checks():
    assert not is_valid_date_time_format("1٥-01-2024 10:00")
    assert not is_valid_time_format("1٠:00")
