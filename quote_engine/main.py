"""
Digitisation Quote Engine — Main Entry Point

Price the baseline assumptions (CLI):
    python -m quote_engine --scenario standard --preset medium

Run as an API server:
    python -m quote_engine --serve
    # or: uvicorn quote_engine.api:app --reload --port 8000

Or import and run programmatically:
    from quote_engine.main import run
    model = run("aggressive")
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from quote_engine.config import get_settings
from quote_engine.models.schemas import QuoteModel
from quote_engine.orchestration.engine import QuoteEngine
from quote_engine.pricing.presets import apply_preset, default_inputs
from quote_engine.utils.logger import setup_logging


def run(
    scenario_id: Optional[str] = None,
    preset_id: Optional[str] = None,
    scanning: bool = True,
) -> QuoteModel:
    """Price the baseline inputs and log a summary."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    scenario_id = scenario_id or settings.default_scenario
    inputs = default_inputs()
    if preset_id:
        inputs = apply_preset(inputs, preset_id)
    if not scanning:
        inputs = inputs.model_copy(update={
            "scanning": inputs.scanning.model_copy(update={"enabled": False}),
        })

    logger.info("=" * 60)
    logger.info(f"  {settings.app_name.upper()}")
    logger.info(f"  Scenario: {scenario_id} | Started: {datetime.now(timezone.utc).isoformat()}")
    logger.info("=" * 60)

    model = QuoteEngine().compute(inputs, scenario_id)
    _print_summary(model)
    return model


def _print_summary(model: QuoteModel) -> None:
    """Log a human-readable summary of the quote."""
    logger = logging.getLogger(__name__)

    logger.info("")
    logger.info("-" * 60)
    logger.info("  QUOTE SUMMARY")
    logger.info("-" * 60)
    logger.info(f"  Documents:      {model.volumes.total_documents:,.0f}")
    logger.info(f"  Pages:          {model.volumes.total_pages:,.0f}")
    if model.scanning is not None:
        logger.info(
            f"  Scanning:       {model.scanning.days_needed} days / "
            f"{model.scanning.months_needed} months"
        )
    logger.info(f"  Ingestion:      £{model.ingestion.price:,.2f}")
    logger.info(f"  Build:          £{model.build.price:,.2f}")
    logger.info(f"  CAPEX:          £{model.capex.price:,.2f} ({model.capex_gross_margin:.1%} margin)")
    logger.info(f"  OPEX (annual):  £{model.opex_annual.price:,.2f}")
    logger.info(f"  Total quote:    £{model.total_quote.price:,.2f}")
    logger.info(
        f"  Target:         {model.variance.target_margin:.0%} "
        f"({model.variance.variance_points:+.1f} pts, {model.variance.status.value})"
    )
    logger.info("-" * 60)

    logger.info(f"\n  Line Items: {len(model.line_items)}")
    for item in model.line_items:
        logger.info(
            f"    {item.id:<16} | {item.description:<32} | "
            f"cost £{item.cost:>12,.2f} | price £{item.price:>12,.2f}"
        )

    for error in model.validation.errors:
        logger.warning(f"  Invalid input: {error}")
    for warning in model.validation.warnings:
        logger.warning(f"  Warning: {warning}")
    logger.info("")


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    host = host or settings.api_host
    port = port or settings.api_port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("quote_engine.api:app", host=host, port=port, reload=settings.debug)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quote_engine", description="Price a digitisation quote.")
    parser.add_argument("--scenario", default=None, help="Scenario id (default from settings)")
    parser.add_argument("--preset", default=None, help="Assumption preset to apply")
    parser.add_argument("--no-scanning", action="store_true", help="Price without the scanning service")
    parser.add_argument("--serve", action="store_true", help="Start the HTTP API instead")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.serve:
        serve()
    else:
        run(args.scenario, args.preset, scanning=not args.no_scanning)


if __name__ == "__main__":
    main()
