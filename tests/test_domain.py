"""Unit tests for domain primitives and field normalizers.

Run with: pytest tests/test_domain.py -v
"""

import re
import uuid

import pytest

from events.domain import EventId
from events.domain.errors import (
    ErrorCode,
    InvalidDateFormatError,
    InvalidTimeFormatError,
    InvalidTimeValuesError,
    ValidationError,
)
from events.domain.normalizers import (
    SLUG_MAX_LENGTH,
    fit_slug,
    is_valid_email,
    is_valid_slug,
    normalize_date,
    normalize_time,
    require_string_list,
    require_text,
    slugify,
)


class TestSlugify:
    """Tests for slug generation."""

    def test_lowercases_and_hyphenates(self):
        assert slugify("React Summit 2026") == "react-summit-2026"

    def test_trims_surrounding_whitespace(self):
        assert slugify("   Next.js Conf   ") == "nextjs-conf"

    def test_collapses_whitespace_and_hyphen_runs(self):
        assert slugify("Vue  --  Amsterdam\t\nMeetup") == "vue-amsterdam-meetup"

    def test_drops_non_ascii_letters_instead_of_transliterating(self):
        assert slugify("Café") == "caf"
        assert slugify("JSConf Kraków") == "jsconf-krakw"

    def test_strips_punctuation(self):
        assert slugify("Hello, World! (2024)") == "hello-world-2024"

    def test_can_be_empty(self):
        assert slugify("!!!") == ""
        assert slugify("日本語") == ""

    @pytest.mark.parametrize("value", ["react-summit", "a-b-c-1", "hackmit"])
    def test_idempotent_on_slugs(self, value):
        assert slugify(slugify(value)) == slugify(value)

    def test_slug_format_check(self):
        assert is_valid_slug("react-summit-2026")
        assert not is_valid_slug("React-Summit")
        assert not is_valid_slug("-leading")
        assert not is_valid_slug("double--hyphen")
        assert not is_valid_slug("")

    def test_fit_slug_leaves_room_for_suffix(self):
        base = "a" * 300
        assert fit_slug(base) == "a" * SLUG_MAX_LENGTH
        assert fit_slug(base, "-12") == "a" * (SLUG_MAX_LENGTH - 3) + "-12"

    def test_fit_slug_drops_dangling_hyphen(self):
        base = "a" * (SLUG_MAX_LENGTH - 1) + "-bc"
        assert fit_slug(base) == "a" * (SLUG_MAX_LENGTH - 1)

    def test_fit_slug_keeps_short_slugs(self):
        assert fit_slug("react-summit", "-1") == "react-summit-1"


class TestNormalizeTime:
    """Tests for 24-hour time normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("9:30 AM", "09:30"),
            ("12:00 AM", "00:00"),
            ("12:00 PM", "12:00"),
            ("3:45 PM", "15:45"),
            ("3:45pm", "15:45"),
            ("14:05", "14:05"),
            (" 7:00 ", "07:00"),
            ("13:00 PM", "13:00"),
        ],
    )
    def test_normalizes(self, raw, expected):
        assert normalize_time(raw) == expected

    def test_out_of_range_hours(self):
        with pytest.raises(InvalidTimeValuesError) as exc_info:
            normalize_time("25:00")
        assert exc_info.value.code is ErrorCode.INVALID_TIME_VALUES

    def test_out_of_range_minutes(self):
        with pytest.raises(InvalidTimeValuesError):
            normalize_time("10:60")

    @pytest.mark.parametrize("raw", ["14", "10:5", "10:00 XM", "ten:30", "10:00:00", "1:00 Am"])
    def test_bad_shape(self, raw):
        with pytest.raises(InvalidTimeFormatError) as exc_info:
            normalize_time(raw)
        assert exc_info.value.field == "time"


class TestNormalizeDate:
    """Tests for ISO instant normalization."""

    def test_bare_date(self):
        value = normalize_date("2024-06-15")
        assert re.fullmatch(r"2024-06-15T\d{2}:\d{2}:\d{2}\.\d{3}Z", value)
        assert value == "2024-06-15T00:00:00.000Z"

    def test_natural_language(self):
        assert normalize_date("June 15, 2024") == "2024-06-15T00:00:00.000Z"

    def test_converts_offsets_to_utc(self):
        assert normalize_date("2024-06-15T10:30:00+02:00") == "2024-06-15T08:30:00.000Z"

    def test_keeps_milliseconds(self):
        assert normalize_date("2024-06-15T10:30:00.123456Z") == "2024-06-15T10:30:00.123Z"

    def test_canonical_value_is_stable(self):
        once = normalize_date("2024-06-15")
        assert normalize_date(once) == once

    def test_pads_years_below_1000(self):
        assert normalize_date("0999-06-15") == "0999-06-15T00:00:00.000Z"

    @pytest.mark.parametrize(
        "raw", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"]
    )
    def test_offset_pushes_past_supported_range(self, raw):
        with pytest.raises(InvalidDateFormatError):
            normalize_date(raw)

    @pytest.mark.parametrize("raw", ["not-a-valid-date", "", "2024-02-30"])
    def test_rejects_garbage(self, raw):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            normalize_date(raw)
        assert exc_info.value.code is ErrorCode.INVALID_DATE_FORMAT


class TestEmailValidation:
    """Tests for the email predicate."""

    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "test.user@example.com",
            "user+tag@example.co.uk",
            "user123@test-domain.com",
            "a@b.c",
        ],
    )
    def test_accepts(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "notanemail",
            "missing@domain",
            "@example.com",
            "user@",
            "user @example.com",
            "user@example",
            "user..name@example.com",
            "a@b@c.com",
        ],
    )
    def test_rejects(self, email):
        assert not is_valid_email(email)


class TestRequiredFields:
    def test_require_text_trims(self):
        assert require_text("  Venue  ", "venue") == "Venue"

    @pytest.mark.parametrize("value", ["", "   ", None, 5])
    def test_require_text_rejects(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_text(value, "venue")
        assert exc_info.value.field == "venue"

    def test_string_list_keeps_order(self):
        assert require_string_list(["b", "a", "c"], "tags") == ("b", "a", "c")

    def test_string_list_allows_empty(self):
        assert require_string_list([], "agenda") == ()

    @pytest.mark.parametrize("value", ["tag", [1, 2], None])
    def test_string_list_rejects(self, value):
        with pytest.raises(ValidationError):
            require_string_list(value, "tags")


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        raw = uuid.uuid4()
        assert EventId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")
