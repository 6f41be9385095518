import argparse
import csv
import json
import logging
import os
from typing import Any, Dict, List

import pandas as pd

from .common import load_config, load_json, validate_client_payload, warn_missing
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["row", "valid", "name", "email", "birthDate", "issues"]


def validate_payloads(payloads: Any, partial: bool = False) -> pd.DataFrame:
    if not isinstance(payloads, list):
        logger.warning("Expected a JSON list of client payloads, got %s", type(payloads).__name__)
        payloads = []
    records: List[Dict[str, Any]] = []
    for idx, payload in enumerate(payloads):
        draft, issues = validate_client_payload(payload, partial=partial)
        source = draft.to_dict() if draft else (payload if isinstance(payload, dict) else {})
        records.append(
            {
                "row": idx,
                "valid": 0 if issues else 1,
                "name": str(source.get("name", "") or ""),
                "email": str(source.get("email", "") or ""),
                "birthDate": str(source.get("birthDate", "") or ""),
                "issues": json.dumps([issue.to_dict() for issue in issues], ensure_ascii=False),
            }
        )
    return pd.DataFrame(records, columns=REPORT_COLUMNS)


def build(args, config=None):
    config = config or load_config(args)
    payloads_json = config.inputs.payloads_json
    if warn_missing(payloads_json, "Client payloads JSON"):
        return None

    report = validate_payloads(load_json(payloads_json), partial=bool(getattr(args, "partial", False)))
    out_dir = str(config.outputs.dir)
    os.makedirs(out_dir, exist_ok=True)
    out_report = os.path.join(out_dir, "client_validation_report.csv")
    report.to_csv(out_report, index=False, encoding="utf-8", quoting=csv.QUOTE_ALL)

    total = len(report)
    valid = int(report["valid"].sum()) if total else 0
    print({"payloads_total": total, "valid": valid, "invalid": total - valid})
    print(f"Saved: {out_report}")
    return report


def main():
    parser = argparse.ArgumentParser(description="Validate client create/update payloads.")
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--payloads-json", type=str, default=None)
    parser.add_argument("--out-dir", type=str, default=None)
    parser.add_argument("--partial", action="store_true", help="Treat payloads as partial updates")
    parser.add_argument("--log-level", type=str, default=None, help="Override logging level")

    args = parser.parse_args()
    config = load_config(args)
    configure_logging(config, level_override=args.log_level)
    build(args, config=config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
