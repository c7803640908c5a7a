"""Tests for the Jira custom field encoders."""

from datetime import date, datetime, timedelta, timezone

import pytest

from jira_payload.exceptions import PayloadValidationError
from jira_payload.jira import encoders

FIELD_ID = "customfield_10043"

# (encoder, valid arguments after the field id)
ENCODER_CASES = [
    (encoders.encode_cascading_select, ("America", "Colombia")),
    (encoders.encode_checkbox, (["Option A"],)),
    (encoders.encode_date, (date(2024, 3, 1),)),
    (encoders.encode_datetime, (datetime(2024, 3, 1, 10, 30),)),
    (encoders.encode_group, ("jira-users",)),
    (encoders.encode_groups, (["jira-users"],)),
    (encoders.encode_multi_select, (["Option A"],)),
    (encoders.encode_number, (1,)),
    (encoders.encode_radio_button, ("Yes",)),
    (encoders.encode_select, ("High",)),
    (encoders.encode_text, ("some text",)),
    (encoders.encode_url, ("https://example.com",)),
    (encoders.encode_user, ("5b10a2844c20165700ede21g",)),
    (encoders.encode_users, (["5b10a2844c20165700ede21g"],)),
]


@pytest.mark.parametrize("encoder,args", ENCODER_CASES)
def test_empty_field_id_is_rejected(encoder, args):
    """Every encoder refuses an empty field id."""
    with pytest.raises(PayloadValidationError, match="no field id set"):
        encoder("", *args)


@pytest.mark.parametrize("encoder,args", ENCODER_CASES)
def test_valid_input_is_encoded(encoder, args):
    """Every encoder accepts a field id and a valid value."""
    assert encoder(FIELD_ID, *args) is not None


class TestOptionEncoders:
    """Tests for option based encoders."""

    def test_cascading_select(self):
        """Test the parent/child shape of a cascading select."""
        assert encoders.encode_cascading_select(FIELD_ID, "America", "Colombia") == {
            "value": "America",
            "child": {"value": "Colombia"},
        }

    @pytest.mark.parametrize(
        "parent,child,message",
        [
            ("", "Colombia", "no cascading parent value set"),
            ("America", "", "no cascading child value set"),
            (None, "Colombia", "no cascading parent value set"),
        ],
    )
    def test_cascading_select_requires_both_values(self, parent, child, message):
        """Test that a cascading select needs a parent and a child."""
        with pytest.raises(PayloadValidationError, match=message) as exc_info:
            encoders.encode_cascading_select(FIELD_ID, parent, child)
        assert exc_info.value.field_id == FIELD_ID

    def test_select_and_radio_button(self):
        """Test single option shapes."""
        assert encoders.encode_select(FIELD_ID, "High") == {"value": "High"}
        assert encoders.encode_radio_button(FIELD_ID, "Yes") == {"value": "Yes"}

    def test_select_requires_option(self):
        """Test that empty options are rejected."""
        with pytest.raises(PayloadValidationError, match="no select type set"):
            encoders.encode_select(FIELD_ID, "")
        with pytest.raises(PayloadValidationError, match="no button type set"):
            encoders.encode_radio_button(FIELD_ID, "")

    def test_multi_select_keeps_order(self):
        """Test that options are encoded in the order given."""
        assert encoders.encode_multi_select(FIELD_ID, ["B", "A", "C"]) == [
            {"value": "B"},
            {"value": "A"},
            {"value": "C"},
        ]

    def test_checkbox_accepts_tuple(self):
        """Test that any sequence of options is accepted."""
        assert encoders.encode_checkbox(FIELD_ID, ("Option A", "Option B")) == [
            {"value": "Option A"},
            {"value": "Option B"},
        ]

    @pytest.mark.parametrize("options", [[], None, "Option A", ["Option A", ""]])
    def test_checkbox_rejects_invalid_options(self, options):
        """Test empty lists, bare strings and empty options."""
        with pytest.raises(PayloadValidationError, match="no check-box type set"):
            encoders.encode_checkbox(FIELD_ID, options)

    def test_multi_select_rejects_empty_list(self):
        """Test that an empty option list is rejected."""
        with pytest.raises(PayloadValidationError, match="no multiselect type set"):
            encoders.encode_multi_select(FIELD_ID, [])


class TestDateEncoders:
    """Tests for the date and date-time encoders."""

    def test_date_from_date(self):
        """Test encoding a date object."""
        assert encoders.encode_date(FIELD_ID, date(2024, 3, 1)) == "2024-03-01"

    def test_date_from_datetime_uses_date_part(self):
        """Test that the time part is dropped for date pickers."""
        value = datetime(2024, 3, 1, 23, 59, tzinfo=timezone.utc)
        assert encoders.encode_date(FIELD_ID, value) == "2024-03-01"

    def test_date_from_strings(self):
        """Test ISO strings and epoch milliseconds."""
        assert encoders.encode_date(FIELD_ID, "2024-03-01T10:00:00Z") == "2024-03-01"
        assert encoders.encode_date(FIELD_ID, 1709251200000) == "2024-03-01"

    def test_compact_iso_date_string(self):
        """Test that YYYYMMDD strings are dates, not epoch milliseconds."""
        assert encoders.encode_date(FIELD_ID, "20240301") == "2024-03-01"
        assert encoders.encode_datetime(FIELD_ID, "20240301") == (
            "2024-03-01T00:00:00Z"
        )

    @pytest.mark.parametrize("value", ["1709251200000", "2024301", "20241301"])
    def test_other_digit_strings_are_rejected(self, value):
        """Test that digit strings other than a valid YYYYMMDD fail."""
        with pytest.raises(PayloadValidationError, match="could not parse"):
            encoders.encode_date(FIELD_ID, value)

    @pytest.mark.parametrize("value", [None, "", date.min, datetime.min])
    def test_date_rejects_zero_values(self, value):
        """Test that unset or minimum dates are rejected."""
        with pytest.raises(PayloadValidationError, match="no datepicker type set"):
            encoders.encode_date(FIELD_ID, value)

    def test_date_rejects_unparseable_string(self):
        """Test that garbage strings are rejected instead of guessed."""
        with pytest.raises(PayloadValidationError, match="could not parse"):
            encoders.encode_date(FIELD_ID, "not a date")

    def test_datetime_utc(self):
        """Test that UTC timestamps use the Z suffix."""
        value = datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
        assert encoders.encode_datetime(FIELD_ID, value) == "2024-03-01T10:30:00Z"

    def test_datetime_with_offset(self):
        """Test that non UTC offsets are preserved."""
        value = datetime(2024, 3, 1, 10, 30, tzinfo=timezone(timedelta(hours=-3)))
        assert encoders.encode_datetime(FIELD_ID, value) == "2024-03-01T10:30:00-03:00"

    def test_datetime_naive_is_utc(self):
        """Test that naive datetimes are taken as UTC and truncated to seconds."""
        value = datetime(2024, 3, 1, 10, 30, 15, 123456)
        assert encoders.encode_datetime(FIELD_ID, value) == "2024-03-01T10:30:15Z"

    def test_datetime_from_date_and_string(self):
        """Test plain dates and Jira formatted strings."""
        assert encoders.encode_datetime(FIELD_ID, date(2024, 3, 1)) == (
            "2024-03-01T00:00:00Z"
        )
        assert encoders.encode_datetime(
            FIELD_ID, "2024-03-01T10:30:00.000+0000"
        ) == ("2024-03-01T10:30:00Z")

    @pytest.mark.parametrize("value", [None, "", datetime.min])
    def test_datetime_rejects_zero_values(self, value):
        """Test that unset datetimes are rejected."""
        with pytest.raises(PayloadValidationError, match="no datetime type set"):
            encoders.encode_datetime(FIELD_ID, value)


class TestScalarEncoders:
    """Tests for number, text, url, group and user encoders."""

    @pytest.mark.parametrize("value", [0, 0.0, -3, 42.5])
    def test_number_accepts_zero_and_negatives(self, value):
        """Test that any number, zero included, is encoded bare."""
        assert encoders.encode_number(FIELD_ID, value) == value

    @pytest.mark.parametrize(
        "value", [None, True, "3", float("nan"), float("inf"), float("-inf")]
    )
    def test_number_rejects_non_numbers(self, value):
        """Test that booleans, strings, None and non finite floats are rejected."""
        with pytest.raises(PayloadValidationError, match="no number type set"):
            encoders.encode_number(FIELD_ID, value)

    def test_text_and_url(self):
        """Test that text and URLs are encoded as bare strings."""
        assert encoders.encode_text(FIELD_ID, "hello") == "hello"
        assert encoders.encode_url(FIELD_ID, "https://example.com") == (
            "https://example.com"
        )

    def test_text_and_url_reject_empty(self):
        """Test that empty strings are rejected."""
        with pytest.raises(PayloadValidationError, match="no text type set"):
            encoders.encode_text(FIELD_ID, "")
        with pytest.raises(PayloadValidationError, match="no url type set"):
            encoders.encode_url(FIELD_ID, "")

    def test_groups(self):
        """Test group picker shapes."""
        assert encoders.encode_group(FIELD_ID, "jira-users") == {"name": "jira-users"}
        assert encoders.encode_groups(FIELD_ID, ["jira-users", "admins"]) == [
            {"name": "jira-users"},
            {"name": "admins"},
        ]

    def test_groups_reject_empty(self):
        """Test empty group input."""
        with pytest.raises(PayloadValidationError, match="no group name set"):
            encoders.encode_group(FIELD_ID, "")
        with pytest.raises(PayloadValidationError, match="no groups names set"):
            encoders.encode_groups(FIELD_ID, [])

    def test_users(self):
        """Test user picker shapes."""
        assert encoders.encode_user(FIELD_ID, "abc") == {"accountId": "abc"}
        assert encoders.encode_users(FIELD_ID, ["abc", "def"]) == [
            {"accountId": "abc"},
            {"accountId": "def"},
        ]

    def test_users_reject_empty(self):
        """Test empty user input."""
        with pytest.raises(PayloadValidationError, match="no user type set"):
            encoders.encode_user(FIELD_ID, "")
        with pytest.raises(PayloadValidationError, match="no multi-user type set"):
            encoders.encode_users(FIELD_ID, [""])
