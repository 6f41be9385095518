from __future__ import annotations

from typing import Any

from .alphabet import ALL_LETTERS_PRESENT, alphabet_letters, first_missing_letter
from .config_loader import PipelineConfig, load_pipeline_config
from .envelope import build_client_envelope, build_client_item, load_json, warn_missing
from .models import ClientDraft, NormalizedClient, ValidationIssue
from .normalization import (
    CLIENT_COLUMNS,
    FallbackIdFactory,
    NormalizationSettings,
    clients_to_frame,
    dig,
    dig_text,
    filter_clients,
    normalize_client_item,
    normalize_clients,
)
from .validation import validate_client_payload, validate_email_address

__all__ = [
    "ALL_LETTERS_PRESENT",
    "CLIENT_COLUMNS",
    "ClientDraft",
    "FallbackIdFactory",
    "NormalizationSettings",
    "NormalizedClient",
    "PipelineConfig",
    "ValidationIssue",
    "alphabet_letters",
    "build_client_envelope",
    "build_client_item",
    "build_settings",
    "clients_to_frame",
    "dig",
    "dig_text",
    "ensure_normalized_client",
    "filter_clients",
    "first_missing_letter",
    "load_config",
    "load_json",
    "load_pipeline_config",
    "normalize_client_item",
    "normalize_clients",
    "validate_client_payload",
    "validate_email_address",
    "warn_missing",
]


def load_config(args: Any) -> PipelineConfig:
    return load_pipeline_config(args)


def build_settings(config: PipelineConfig) -> NormalizationSettings:
    return NormalizationSettings.from_args(
        fallback_id_length=config.normalization.fallback_id_length,
        seed=config.normalization.seed,
    )


def ensure_normalized_client(obj: Any) -> NormalizedClient:
    if isinstance(obj, NormalizedClient):
        return obj
    if isinstance(obj, dict):
        return NormalizedClient.from_mapping(obj)
    raise TypeError(f"Unsupported client payload type: {type(obj)!r}")
