import pytest

from toystore_clients.models import ClientDraft
from toystore_clients.validation import (
    BIRTH_DATE_INVALID,
    BIRTH_DATE_REQUIRED,
    EMAIL_INVALID,
    NAME_REQUIRED,
    is_parseable_date,
    validate_client_payload,
    validate_email_address,
)


def test_valid_client_payload():
    draft, issues = validate_client_payload(
        {"name": "João Silva", "email": "joao@example.com", "birthDate": "1990-01-01"}
    )
    assert issues == []
    assert draft == ClientDraft(name="João Silva", email="joao@example.com", birth_date="1990-01-01")


@pytest.mark.parametrize(
    "payload, field, message",
    [
        ({"name": "", "email": "joao@example.com", "birthDate": "1990-01-01"}, "name", NAME_REQUIRED),
        ({"email": "joao@example.com", "birthDate": "1990-01-01"}, "name", NAME_REQUIRED),
        ({"name": "João", "email": "invalid-email", "birthDate": "1990-01-01"}, "email", EMAIL_INVALID),
        ({"name": "João", "email": "joao@example.com", "birthDate": ""}, "birthDate", BIRTH_DATE_REQUIRED),
        ({"name": "João", "email": "joao@example.com", "birthDate": "not-a-date"}, "birthDate", BIRTH_DATE_INVALID),
    ],
)
def test_invalid_client_payload(payload, field, message):
    draft, issues = validate_client_payload(payload)
    assert draft is None
    assert [(issue.field, issue.message) for issue in issues] == [(field, message)]


def test_issues_follow_field_order():
    _, issues = validate_client_payload({"name": "", "email": "nope", "birthDate": ""})
    assert [issue.field for issue in issues] == ["name", "email", "birthDate"]


def test_partial_payload_checks_only_present_fields():
    draft, issues = validate_client_payload({"email": "ana@example.com"}, partial=True)
    assert issues == []
    assert draft is not None and draft.email == "ana@example.com" and draft.name == ""

    draft, issues = validate_client_payload({}, partial=True)
    assert issues == [] and draft is not None

    draft, issues = validate_client_payload({"name": ""}, partial=True)
    assert draft is None
    assert issues[0].to_dict() == {"field": "name", "message": NAME_REQUIRED}


def test_non_mapping_payload_is_rejected():
    draft, issues = validate_client_payload(["João"])  # type: ignore[arg-type]
    assert draft is None
    assert len(issues) == 1


def test_email_and_date_helpers():
    assert validate_email_address("ana@example.com") == "ana@example.com"
    assert validate_email_address("  ") == ""
    assert validate_email_address(None) == ""
    assert validate_email_address("ana@@example.com") == ""
    assert is_parseable_date("1987-08-15") is True
    assert is_parseable_date("2024-13-45") is False
    assert is_parseable_date(19870815) is False
