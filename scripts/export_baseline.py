"""
Baseline Export Script
======================
Writes the baseline snapshot (default inputs, scenario table, assumption
presets) to docs/baseline/current.json, or to the given path.

Usage:
    python scripts/export_baseline.py
    python scripts/export_baseline.py --output build/baseline.json
    python scripts/export_baseline.py --with-quote standard

Run from the project root.
"""

from __future__ import annotations

import argparse
import logging

from quote_engine.config import get_settings
from quote_engine.orchestration.engine import QuoteEngine
from quote_engine.pricing.presets import default_inputs
from quote_engine.services.baseline_service import BaselineService
from quote_engine.utils.logger import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Export the pricing baseline snapshot")
    parser.add_argument("--output", default=None, help="Output path (default: settings.baseline_dir)")
    parser.add_argument(
        "--with-quote", metavar="SCENARIO", default=None,
        help="Also record the default quote for this scenario as runtime state",
    )
    args = parser.parse_args()

    setup_logging(get_settings().log_level)
    logger = logging.getLogger("export_baseline")

    service = BaselineService()
    if args.with_quote:
        inputs = default_inputs()
        model = QuoteEngine(registry=service.registry).compute(inputs, args.with_quote)
        path = service.export(args.output, inputs=inputs, model=model, scenario_id=args.with_quote)
    else:
        path = service.export(args.output)

    logger.info(f"Baseline exported → {path}")


if __name__ == "__main__":
    main()
