from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # type: ignore[import-untyped]

from .normalization import DEFAULT_FALLBACK_ID_LENGTH


@dataclass
class InputsConfig:
    envelope_json: Optional[str] = None
    payloads_json: Optional[str] = None


@dataclass
class OutputsConfig:
    dir: Path


@dataclass
class NormalizationConfig:
    fallback_id_length: int = DEFAULT_FALLBACK_ID_LENGTH
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class PipelineConfig:
    inputs: InputsConfig
    outputs: OutputsConfig
    normalization: NormalizationConfig
    logging: LoggingConfig


def _load_yaml(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_pipeline_config(args: argparse.Namespace) -> PipelineConfig:
    config_data = _load_yaml(getattr(args, "config", None))
    inputs_cfg = config_data.get("inputs", {}) or {}
    outputs_cfg = config_data.get("outputs", {}) or {}
    normalization_cfg = config_data.get("normalization", {}) or {}
    logging_cfg = config_data.get("logging", {}) or {}

    inputs = InputsConfig(
        envelope_json=getattr(args, "envelope_json", None) or inputs_cfg.get("envelope_json"),
        payloads_json=getattr(args, "payloads_json", None) or inputs_cfg.get("payloads_json"),
    )

    outputs_dir = Path(getattr(args, "out_dir", None) or outputs_cfg.get("dir") or os.getcwd())
    outputs = OutputsConfig(dir=outputs_dir)

    arg_seed = getattr(args, "seed", None)
    normalization = NormalizationConfig(
        fallback_id_length=int(
            getattr(args, "fallback_id_length", None)
            or normalization_cfg.get("fallback_id_length")
            or DEFAULT_FALLBACK_ID_LENGTH
        ),
        seed=arg_seed if arg_seed is not None else normalization_cfg.get("seed"),
    )

    arg_level = getattr(args, "log_level", None)
    effective_level = (arg_level or logging_cfg.get("level") or "WARNING").upper()
    logging_config = LoggingConfig(level=effective_level)

    return PipelineConfig(
        inputs=inputs,
        outputs=outputs,
        normalization=normalization,
        logging=logging_config,
    )
