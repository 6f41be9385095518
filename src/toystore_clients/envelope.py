from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .models import ClientDraft

logger = logging.getLogger(__name__)

ClientRow = Union[ClientDraft, Mapping[str, Any]]


def _ensure_draft(row: ClientRow) -> ClientDraft:
    if isinstance(row, ClientDraft):
        return row
    if isinstance(row, Mapping):
        return ClientDraft.from_mapping(dict(row))
    raise TypeError(f"Unsupported client row type: {type(row)!r}")


def build_client_item(draft: ClientDraft) -> Dict[str, Any]:
    item: Dict[str, Any] = {}
    if draft.client_id:
        item["id"] = draft.client_id
    item["info"] = {
        "nomeCompleto": draft.name,
        "detalhes": {"email": draft.email, "nascimento": draft.birth_date},
    }
    item["duplicado"] = {"nomeCompleto": draft.name}
    item["estatisticas"] = {"vendas": []}
    return item


def build_client_envelope(rows: Iterable[ClientRow], page: int = 1) -> Dict[str, Any]:
    """
    Wrap flat client rows in the nested listing shape served to the back office.

    Each row may be a :class:`ClientDraft` or a mapping with ``id``, ``name``,
    ``email`` and ``birth_date`` (or ``birthDate``) keys.
    """
    items: List[Dict[str, Any]] = [build_client_item(_ensure_draft(row)) for row in rows]
    return {
        "data": {"clientes": items},
        "meta": {"registroTotal": len(items), "pagina": page},
        "redundante": {"status": "ok"},
    }


def warn_missing(path: Optional[str], label: str) -> bool:
    if not path or not os.path.exists(path):
        logger.warning("%s path missing: %s", label, path)
        return True
    return False


def load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    logger.debug("Loaded JSON payload from %s", path)
    return payload


__all__ = ["build_client_envelope", "build_client_item", "load_json", "warn_missing"]
