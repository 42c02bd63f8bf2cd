from __future__ import annotations
import argparse
import json
import logging
import os
from pathlib import Path

import dotenv
dotenv.load_dotenv()

from address_reconcile.config import load_config
from address_reconcile.pipeline import ReconciliationPipeline
from address_reconcile.utils import EnhancedJSONEncoder


def main():
    root = Path(__file__).resolve().parent
    ap = argparse.ArgumentParser(description="Reconcile a source address table against a target table.")
    ap.add_argument("--config", default=os.getenv("ADDRESS_CONFIG") or str(root / "data" / "config.default.json"))
    ap.add_argument("--filter", default=None, help="duplicate/missing/divergent/matching/subaddress/floor/building/status")
    args = ap.parse_args()

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    cfg = load_config(args.config)

    pipe = ReconciliationPipeline(cfg)
    result = pipe.run(filter_verb=args.filter)
    print("Pipeline finished:", json.dumps(result, cls=EnhancedJSONEncoder, ensure_ascii=False))
    if cfg.report_path:
        print("Report written to:", cfg.report_path)


if __name__ == "__main__":
    main()
