from __future__ import annotations

import logging
import os
from typing import Optional

from .config_loader import PipelineConfig

LOG_LEVEL_ENV = "TOYSTORE_CLIENTS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_level(level_name: str) -> int:
    """Map ``"debug"``, ``"INFO"``, ``"10"`` and the like to a level number; unknown names give INFO."""
    normalized = (level_name or "INFO").upper()
    if normalized.isdigit():
        return int(normalized)
    level = logging.getLevelName(normalized)
    return level if isinstance(level, int) else logging.INFO


def effective_level_name(config: PipelineConfig, level_override: Optional[str] = None) -> str:
    return (
        os.getenv(LOG_LEVEL_ENV)
        or level_override
        or config.logging.level
        or DEFAULT_LOG_LEVEL
    )


def configure_logging(config: PipelineConfig, level_override: Optional[str] = None) -> None:
    """
    Set the root log level for the client normalization and validation CLIs.

    ``TOYSTORE_CLIENTS_LOG_LEVEL`` wins over ``--log-level``, which wins over
    ``logging.level`` in the pipeline YAML. An existing root handler (pytest's,
    for instance) is kept and only its level is changed.
    """
    level_value = _resolve_level(effective_level_name(config, level_override))

    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level_value)
    else:
        logging.basicConfig(level=level_value)
