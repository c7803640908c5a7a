"""Tests for the CustomFieldCollection."""

import copy
import json
from datetime import date, datetime, timezone

import pytest

from jira_payload.config import PayloadConfig
from jira_payload.exceptions import FieldCollisionError, PayloadValidationError
from jira_payload.jira.custom_fields import CustomFieldCollection

# (setter name, valid arguments after the field id, expected encoded value)
SETTER_CASES = [
    (
        "cascading",
        ("America", "Colombia"),
        {"value": "America", "child": {"value": "Colombia"}},
    ),
    ("checkbox", (["A", "B"],), [{"value": "A"}, {"value": "B"}]),
    ("date", (date(2024, 3, 1),), "2024-03-01"),
    (
        "datetime",
        (datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc),),
        "2024-03-01T10:30:00Z",
    ),
    ("group", ("jira-users",), {"name": "jira-users"}),
    ("groups", (["jira-users", "admins"],), [{"name": "jira-users"}, {"name": "admins"}]),
    ("multi_select", (["A"],), [{"value": "A"}]),
    ("number", (0,), 0),
    ("radio_button", ("Yes",), {"value": "Yes"}),
    ("select", ("High",), {"value": "High"}),
    ("text", ("hello",), "hello"),
    ("url", ("https://example.com",), "https://example.com"),
    ("user", ("abc",), {"accountId": "abc"}),
    ("users", (["abc", "def"],), [{"accountId": "abc"}, {"accountId": "def"}]),
    ("raw", (["backend", "api"],), ["backend", "api"]),
]


@pytest.fixture
def populated() -> CustomFieldCollection:
    """A collection that already holds two fields."""
    collection = CustomFieldCollection()
    collection.text("customfield_10001", "existing")
    collection.select("customfield_10002", "High")
    return collection


@pytest.mark.parametrize("setter,args,expected", SETTER_CASES)
def test_setter_stores_encoded_value(setter, args, expected):
    """Each setter appends exactly one encoded pair."""
    collection = CustomFieldCollection()
    getattr(collection, setter)("customfield_10050", *args)

    assert len(collection) == 1
    assert list(collection) == [("customfield_10050", expected)]
    # Encoded fragments are plain JSON values
    assert json.loads(json.dumps(collection.to_dict())) == {
        "customfield_10050": expected
    }


@pytest.mark.parametrize("setter,args,expected", SETTER_CASES)
def test_setter_with_empty_field_id_leaves_collection_unchanged(
    populated, setter, args, expected
):
    """A failed setter call never mutates the collection."""
    before = copy.deepcopy(populated.to_dict())

    with pytest.raises(PayloadValidationError, match="no field id set"):
        getattr(populated, setter)("", *args)

    assert populated.to_dict() == before
    assert len(populated) == 2


def test_invalid_value_leaves_collection_unchanged(populated):
    """Validation of the value happens before anything is stored."""
    with pytest.raises(PayloadValidationError):
        populated.cascading("customfield_10003", "America", "")
    with pytest.raises(PayloadValidationError):
        populated.users("customfield_10004", [])
    with pytest.raises(PayloadValidationError, match="no field value set"):
        populated.raw("customfield_10005", None)

    assert populated.field_ids == ["customfield_10001", "customfield_10002"]


def test_iteration_preserves_insertion_order():
    """Fields come back in the order they were set."""
    collection = CustomFieldCollection()
    collection.number("customfield_3", 3)
    collection.number("customfield_1", 1)
    collection.number("customfield_2", 2)

    assert collection.field_ids == ["customfield_3", "customfield_1", "customfield_2"]
    assert [field_id for field_id, _ in collection] == collection.field_ids


def test_duplicate_field_id_replaces_value_in_place(populated):
    """By default the last write wins and keeps the original position."""
    populated.text("customfield_10001", "updated")

    assert len(populated) == 2
    assert list(populated) == [
        ("customfield_10001", "updated"),
        ("customfield_10002", {"value": "High"}),
    ]


def test_duplicate_field_id_rejected_when_configured():
    """The reject policy raises and keeps the first value."""
    collection = CustomFieldCollection(PayloadConfig(duplicate_fields="reject"))
    collection.text("customfield_10001", "first")

    with pytest.raises(FieldCollisionError, match="already set") as exc_info:
        collection.text("customfield_10001", "second")

    assert exc_info.value.field_id == "customfield_10001"
    assert collection.get("customfield_10001") == "first"


def test_field_collision_is_a_validation_error():
    """Collisions belong to the single validation error kind."""
    assert issubclass(FieldCollisionError, PayloadValidationError)
    assert issubclass(PayloadValidationError, ValueError)


def test_equality_and_membership(populated):
    """Collections compare by content and order."""
    other = CustomFieldCollection()
    other.text("customfield_10001", "existing")
    other.select("customfield_10002", "High")

    assert populated == other
    assert "customfield_10002" in populated
    assert "customfield_99999" not in populated

    reordered = CustomFieldCollection()
    reordered.select("customfield_10002", "High")
    reordered.text("customfield_10001", "existing")
    assert populated != reordered


def test_to_dict_returns_a_copy(populated):
    """Mutating the returned dict does not affect the collection."""
    data = populated.to_dict()
    data["customfield_99999"] = "injected"

    assert "customfield_99999" not in populated
    assert repr(populated) == (
        "CustomFieldCollection(['customfield_10001', 'customfield_10002'])"
    )
