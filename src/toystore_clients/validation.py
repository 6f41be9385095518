from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd
from email_validator import EmailNotValidError, validate_email

from .models import ClientDraft, ValidationIssue

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required"
EMAIL_INVALID = "Invalid email"
BIRTH_DATE_REQUIRED = "Birth date is required"
BIRTH_DATE_INVALID = "Invalid birth date"


def validate_email_address(raw: Any) -> str:
    """Return the normalized address, or an empty string when ``raw`` is not an email."""
    if not isinstance(raw, str) or not raw.strip():
        return ""
    try:
        result = validate_email(raw.strip(), check_deliverability=False)
    except EmailNotValidError:
        return ""
    return result.normalized


def is_parseable_date(raw: Any) -> bool:
    if not isinstance(raw, str) or not raw.strip():
        return False
    try:
        parsed = pd.to_datetime(raw.strip(), errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return False
    return not pd.isna(parsed)


def validate_client_payload(
    payload: Mapping[str, Any], partial: bool = False
) -> Tuple[Optional[ClientDraft], List[ValidationIssue]]:
    """
    Check a create (or, with ``partial=True``, update) client payload.

    Keys are the presentation names ``name``, ``email`` and ``birthDate``.
    Partial payloads only check the keys they carry. The draft is ``None``
    whenever at least one issue was found.
    """
    if not isinstance(payload, Mapping):
        return None, [ValidationIssue(field="", message="Payload must be an object")]

    issues: List[ValidationIssue] = []
    values: Dict[str, str] = {}

    if not partial or "name" in payload:
        name = payload.get("name")
        if isinstance(name, str) and len(name) >= 1:
            values["name"] = name
        else:
            issues.append(ValidationIssue(field="name", message=NAME_REQUIRED))

    if not partial or "email" in payload:
        email = validate_email_address(payload.get("email"))
        if email:
            values["email"] = email
        else:
            issues.append(ValidationIssue(field="email", message=EMAIL_INVALID))

    if not partial or "birthDate" in payload:
        birth_date = payload.get("birthDate")
        if not isinstance(birth_date, str) or not birth_date.strip():
            issues.append(ValidationIssue(field="birthDate", message=BIRTH_DATE_REQUIRED))
        elif not is_parseable_date(birth_date):
            issues.append(ValidationIssue(field="birthDate", message=BIRTH_DATE_INVALID))
        else:
            values["birth_date"] = birth_date.strip()

    if issues:
        logger.debug(
            "Rejected client payload: %s",
            ", ".join(f"{issue.field}: {issue.message}" for issue in issues),
        )
        return None, issues

    return (
        ClientDraft(
            name=values.get("name", ""),
            email=values.get("email", ""),
            birth_date=values.get("birth_date", ""),
            client_id=str(payload.get("id", "") or ""),
        ),
        issues,
    )


__all__ = [
    "BIRTH_DATE_INVALID",
    "BIRTH_DATE_REQUIRED",
    "EMAIL_INVALID",
    "NAME_REQUIRED",
    "is_parseable_date",
    "validate_client_payload",
    "validate_email_address",
]
