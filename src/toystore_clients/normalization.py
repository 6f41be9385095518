from __future__ import annotations

import logging
import math
import random
import string
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Set

import pandas as pd

from .models import NormalizedClient

logger = logging.getLogger(__name__)

FALLBACK_ID_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_FALLBACK_ID_LENGTH = 9

CLIENT_ITEMS_PATH = ("data", "clientes")
PRIMARY_NAME_PATH = ("info", "nomeCompleto")
FALLBACK_NAME_PATH = ("duplicado", "nomeCompleto")
EMAIL_PATH = ("info", "detalhes", "email")
BIRTH_DATE_PATH = ("info", "detalhes", "nascimento")
CLIENT_ID_PATH = ("id",)

CLIENT_COLUMNS = ["id", "name", "email", "birthDate", "missingLetter"]


@dataclass
class NormalizationSettings:
    fallback_id_length: int = DEFAULT_FALLBACK_ID_LENGTH
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.fallback_id_length = max(1, int(self.fallback_id_length))

    @classmethod
    def from_args(
        cls, fallback_id_length: Optional[int] = None, seed: Optional[int] = None
    ) -> "NormalizationSettings":
        length = int(fallback_id_length or DEFAULT_FALLBACK_ID_LENGTH)
        return cls(fallback_id_length=length, seed=seed)


class FallbackIdFactory:
    """
    Issues short base-36 identifiers for items the server sent without one.

    A factory lives for a single normalization call. Tokens it has issued and
    server ids it was told about are never issued again by the same factory.
    Raises ``ValueError`` once every token of the configured length is taken.
    """

    def __init__(self, length: int = DEFAULT_FALLBACK_ID_LENGTH, seed: Optional[int] = None):
        self.length = max(1, int(length))
        self.capacity = len(FALLBACK_ID_ALPHABET) ** self.length
        self._rng = random.Random(seed)
        self._taken: Set[str] = set()
        self._taken_in_space = 0

    def _in_space(self, value: str) -> bool:
        return len(value) == self.length and all(ch in FALLBACK_ID_ALPHABET for ch in value)

    def reserve(self, value: str) -> None:
        if value and value not in self._taken:
            self._taken.add(value)
            if self._in_space(value):
                self._taken_in_space += 1

    def issue(self) -> str:
        if self._taken_in_space >= self.capacity:
            raise ValueError(
                f"All {self.capacity} fallback ids of length {self.length} are taken; "
                "raise the fallback id length"
            )
        while True:
            token = "".join(self._rng.choice(FALLBACK_ID_ALPHABET) for _ in range(self.length))
            if token not in self._taken:
                self._taken.add(token)
                self._taken_in_space += 1
                return token


def dig(container: Any, path: Sequence[str]) -> Any:
    current = container
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def _coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        if value == 0 or pd.isna(value):
            return ""
        if isinstance(value, float) and not math.isfinite(value):
            return ""
        return str(value)
    return ""


def dig_text(container: Any, path: Sequence[str]) -> str:
    return _coerce_text(dig(container, path))


def resolve_name(item: Any) -> str:
    return dig_text(item, PRIMARY_NAME_PATH) or dig_text(item, FALLBACK_NAME_PATH)


def resolve_email(item: Any) -> str:
    return dig_text(item, EMAIL_PATH)


def resolve_birth_date(item: Any) -> str:
    return dig_text(item, BIRTH_DATE_PATH)


def resolve_client_id(item: Any) -> str:
    return dig_text(item, CLIENT_ID_PATH)


def extract_client_items(envelope: Any) -> List[Any]:
    items = dig(envelope, CLIENT_ITEMS_PATH)
    if items is None:
        return []
    if isinstance(items, (list, tuple)):
        return list(items)
    logger.warning(
        "Ignoring client container of unexpected type %s", type(items).__name__
    )
    return []


def normalize_client_item(
    item: Any, id_factory: FallbackIdFactory
) -> Optional[NormalizedClient]:
    name = resolve_name(item)
    email = resolve_email(item)
    if not (name and email):
        return None
    client_id = resolve_client_id(item) or id_factory.issue()
    return NormalizedClient.create(
        client_id=client_id,
        name=name,
        email=email,
        birth_date=resolve_birth_date(item),
    )


def normalize_clients(
    envelope: Any, settings: Optional[NormalizationSettings] = None
) -> List[NormalizedClient]:
    settings = settings or NormalizationSettings()
    items = extract_client_items(envelope)
    id_factory = FallbackIdFactory(settings.fallback_id_length, settings.seed)
    for item in items:
        id_factory.reserve(resolve_client_id(item))

    clients: List[NormalizedClient] = []
    dropped = 0
    for position, item in enumerate(items):
        client = normalize_client_item(item, id_factory)
        if client is None:
            dropped += 1
            logger.debug("Dropped incomplete client item at position %d", position)
            continue
        clients.append(client)

    if dropped:
        logger.info(
            "Dropped %d of %d client item(s) without a name or email",
            dropped,
            len(items),
        )
    return clients


def _contains(haystack: str, needle: Optional[str]) -> bool:
    term = (needle or "").lower()
    return not term or term in haystack.lower()


def filter_clients(
    clients: Iterable[NormalizedClient],
    name: Optional[str] = None,
    email: Optional[str] = None,
) -> List[NormalizedClient]:
    return [
        client
        for client in clients
        if _contains(client.name, name) and _contains(client.email, email)
    ]


def clients_to_frame(clients: Iterable[NormalizedClient]) -> pd.DataFrame:
    return pd.DataFrame([client.to_dict() for client in clients], columns=CLIENT_COLUMNS)


__all__ = [
    "CLIENT_COLUMNS",
    "FallbackIdFactory",
    "NormalizationSettings",
    "clients_to_frame",
    "dig",
    "dig_text",
    "extract_client_items",
    "filter_clients",
    "normalize_client_item",
    "normalize_clients",
    "resolve_birth_date",
    "resolve_client_id",
    "resolve_email",
    "resolve_name",
]
