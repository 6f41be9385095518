from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .alphabet import first_missing_letter


@dataclass(frozen=True)
class NormalizedClient:
    client_id: str
    name: str
    email: str
    birth_date: str = ""
    missing_letter: str = ""

    @classmethod
    def create(cls, client_id: str, name: str, email: str, birth_date: str = "") -> "NormalizedClient":
        return cls(
            client_id=client_id,
            name=name,
            email=email,
            birth_date=birth_date,
            missing_letter=first_missing_letter(name),
        )

    @classmethod
    def from_mapping(cls, payload: Dict[str, Any]) -> "NormalizedClient":
        return cls.create(
            client_id=str(payload.get("id", "") or ""),
            name=str(payload.get("name", "") or ""),
            email=str(payload.get("email", "") or ""),
            birth_date=str(payload.get("birthDate", "") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.client_id,
            "name": self.name,
            "email": self.email,
            "birthDate": self.birth_date,
            "missingLetter": self.missing_letter,
        }


@dataclass(frozen=True)
class ClientDraft:
    name: str
    email: str
    birth_date: str = ""
    client_id: str = ""

    @staticmethod
    def from_mapping(payload: Dict[str, Any]) -> "ClientDraft":
        birth_date = payload.get("birth_date")
        if birth_date is None:
            birth_date = payload.get("birthDate")
        return ClientDraft(
            name=str(payload.get("name", "") or "").strip(),
            email=str(payload.get("email", "") or "").strip(),
            birth_date=str(birth_date or "").strip(),
            client_id=str(payload.get("id", "") or "").strip(),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.client_id,
            "name": self.name,
            "email": self.email,
            "birthDate": self.birth_date,
        }


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}
