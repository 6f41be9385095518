from __future__ import annotations

import argparse
import csv
import logging
import os
from typing import List, Optional, Tuple

import pandas as pd

from .common import (
    NormalizedClient,
    build_settings,
    clients_to_frame,
    filter_clients,
    load_config,
    load_json,
    normalize_clients,
)
from .config_loader import PipelineConfig
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _resolve_paths(config: PipelineConfig) -> Tuple[str, str]:
    envelope_json = config.inputs.envelope_json
    if not envelope_json:
        raise ValueError("Missing envelope JSON path (--envelope-json or inputs.envelope_json)")
    return envelope_json, str(config.outputs.dir)


def build(
    args: argparse.Namespace, config: Optional[PipelineConfig] = None
) -> Tuple[List[NormalizedClient], pd.DataFrame]:
    config = config or load_config(args)
    envelope_json, out_dir = _resolve_paths(config)

    envelope = load_json(envelope_json)
    clients = normalize_clients(envelope, build_settings(config))

    name_term = getattr(args, "name", None)
    email_term = getattr(args, "email", None)
    if name_term or email_term:
        before = len(clients)
        clients = filter_clients(clients, name=name_term, email=email_term)
        logger.info("Filter kept %d of %d client(s)", len(clients), before)

    df = clients_to_frame(clients)
    os.makedirs(out_dir, exist_ok=True)
    out_clients = os.path.join(out_dir, "normalized_clients.csv")
    df.to_csv(out_clients, index=False, encoding="utf-8", quoting=csv.QUOTE_ALL)

    print(f"Saved: {out_clients}")
    return clients, df


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Normalize a client listing envelope into a flat client table."
    )
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config.")
    parser.add_argument("--envelope-json", type=str, default=None)
    parser.add_argument("--out-dir", type=str, default=None)
    parser.add_argument("--name", type=str, default=None, help="Keep names containing this text")
    parser.add_argument("--email", type=str, default=None, help="Keep emails containing this text")
    parser.add_argument("--fallback-id-length", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default=None, help="Override logging level")
    args = parser.parse_args()
    config = load_config(args)
    configure_logging(config, level_override=args.log_level)
    build(args, config=config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
