from datetime import datetime, timezone

import pytest

from src.modules.user.validation import normalize_user_data, validate_user_data


def test_factory_document_is_valid(user_document_factory):
    result = validate_user_data(user_document_factory())

    assert result.valid is True
    assert result.errors == []


def test_validation_collects_every_failure():
    result = validate_user_data(
        {
            "email": "not-an-email",
            "displayName": "  ",
            "companyName": "",
            "role": "owner",
            "status": "deleted",
            "createdAt": "2024-01-01",
            "department": 3,
            "position": None,
            "createdBy": 42,
        }
    )

    assert result.valid is False
    assert result.errors == [
        "email must be a valid email address",
        "displayName is required",
        "companyName is required",
        'role must be one of "admin", "manager", "user"',
        'status must be one of "active", "inactive", "suspended"',
        "createdAt must be a timestamp",
        "department must be a string",
        "position must be a string",
        "createdBy must be a string or null",
    ]
    assert result.summary().startswith("email must be a valid email address; ")


def test_optional_fields_may_be_absent():
    result = validate_user_data(
        {
            "email": "a@example.com",
            "displayName": "A",
            "companyName": "Acme",
            "role": "manager",
            "status": "suspended",
            "createdAt": datetime.now(timezone.utc),
        }
    )

    assert result.valid is True


def test_normalize_fills_documented_defaults_only():
    raw = {"email": "a@example.com", "displayName": "A", "extra": {"kept": True}}

    normalized = normalize_user_data(raw)

    assert normalized == {
        "email": "a@example.com",
        "displayName": "A",
        "extra": {"kept": True},
        "role": "user",
        "status": "active",
        "department": "",
        "position": "",
        "createdBy": None,
    }
    # Input is not mutated
    assert "role" not in raw


def test_normalize_replaces_empty_role_and_status():
    normalized = normalize_user_data({"role": "", "status": None})

    assert normalized["role"] == "user"
    assert normalized["status"] == "active"


def test_normalize_keeps_existing_values():
    normalized = normalize_user_data(
        {"role": "admin", "status": "inactive", "department": "Sales", "createdBy": "x"}
    )

    assert normalized["role"] == "admin"
    assert normalized["status"] == "inactive"
    assert normalized["department"] == "Sales"
    assert normalized["createdBy"] == "x"


def test_normalize_migrates_legacy_last_updated():
    last_updated = datetime(2023, 5, 1, tzinfo=timezone.utc)

    normalized = normalize_user_data({"lastUpdated": last_updated})

    assert normalized["updatedAt"] == last_updated
    assert normalized["lastUpdated"] == last_updated


def test_normalize_does_not_override_updated_at():
    updated_at = datetime(2024, 1, 1, tzinfo=timezone.utc)

    normalized = normalize_user_data(
        {"updatedAt": updated_at, "lastUpdated": datetime(2020, 1, 1, tzinfo=timezone.utc)}
    )

    assert normalized["updatedAt"] == updated_at


@pytest.mark.parametrize("role", ["admin", "manager", "user", "", None])
def test_normalized_factory_documents_validate(user_document_factory, role):
    document = user_document_factory(role=role)

    assert validate_user_data(normalize_user_data(document)).valid is True
