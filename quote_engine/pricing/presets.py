"""
Baseline assumptions and named assumption presets.

A preset is a partial override of the quality, review, volume and
extraction assumptions; everything it does not name is left untouched.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from quote_engine.models.inputs import Inputs, QualityTierValues


class AssumptionPreset(BaseModel):
    model_config = {"frozen": True}

    preset_id: str
    name: str
    description: str = ""
    tier_shares: QualityTierValues
    review_rates: QualityTierValues
    review_minutes: float
    min_docs_per_site: float
    max_docs_per_site: float
    client_handled_review_pct: float
    conflict_minutes: Optional[float] = None
    tokens_per_page: Optional[float] = None
    pipeline_passes: Optional[float] = None


ASSUMPTION_PRESETS: dict[str, AssumptionPreset] = {
    p.preset_id: p
    for p in (
        AssumptionPreset(
            preset_id="excellent",
            name="Excellent (Controlled Scan)",
            description="AI-optimised scanning with guaranteed quality",
            tier_shares=QualityTierValues(good=0.92, medium=0.07, poor=0.01),
            review_rates=QualityTierValues(good=0.005, medium=0.03, poor=0.10),
            review_minutes=5,
            conflict_minutes=1,
            min_docs_per_site=5,
            max_docs_per_site=10,
            client_handled_review_pct=75,
            tokens_per_page=2100,
            pipeline_passes=1.1,
        ),
        AssumptionPreset(
            preset_id="high",
            name="High Quality",
            description="Clean data, minimal review required",
            tier_shares=QualityTierValues(good=0.65, medium=0.25, poor=0.10),
            review_rates=QualityTierValues(good=0.03, medium=0.10, poor=0.25),
            review_minutes=15,
            min_docs_per_site=4,
            max_docs_per_site=8,
            client_handled_review_pct=10,
        ),
        AssumptionPreset(
            preset_id="medium",
            name="Medium Quality",
            description="Typical mixed-quality estate",
            tier_shares=QualityTierValues(good=0.50, medium=0.35, poor=0.15),
            review_rates=QualityTierValues(good=0.05, medium=0.15, poor=0.35),
            review_minutes=20,
            min_docs_per_site=5,
            max_docs_per_site=10,
            client_handled_review_pct=10,
        ),
        AssumptionPreset(
            preset_id="low",
            name="Low Quality",
            description="Challenging data, high review rates",
            tier_shares=QualityTierValues(good=0.35, medium=0.40, poor=0.25),
            review_rates=QualityTierValues(good=0.10, medium=0.25, poor=0.45),
            review_minutes=30,
            min_docs_per_site=8,
            max_docs_per_site=15,
            client_handled_review_pct=10,
        ),
    )
}


def default_inputs() -> Inputs:
    """The baseline assumption sheet (17,000 sites, scanning enabled)."""
    return Inputs()


def get_preset(preset_id: str) -> AssumptionPreset:
    try:
        return ASSUMPTION_PRESETS[preset_id]
    except KeyError:
        raise KeyError(
            f"Unknown assumption preset '{preset_id}'. Available: {', '.join(ASSUMPTION_PRESETS)}"
        ) from None


def apply_preset(inputs: Inputs, preset_id: str) -> Inputs:
    """Return a copy of `inputs` with the preset's overrides applied."""
    preset = get_preset(preset_id)

    quality_update = {
        "tier_shares": preset.tier_shares,
        "review_rates": preset.review_rates,
        "review_minutes": preset.review_minutes,
        "client_handled_review_pct": preset.client_handled_review_pct,
    }
    if preset.conflict_minutes is not None:
        quality_update["conflict_minutes"] = preset.conflict_minutes

    extraction_update = {}
    if preset.tokens_per_page is not None:
        extraction_update["tokens_per_page"] = preset.tokens_per_page
    if preset.pipeline_passes is not None:
        extraction_update["pipeline_passes"] = preset.pipeline_passes

    return inputs.model_copy(update={
        "quality": inputs.quality.model_copy(update=quality_update),
        "volume": inputs.volume.model_copy(update={
            "min_docs_per_site": preset.min_docs_per_site,
            "max_docs_per_site": preset.max_docs_per_site,
        }),
        "extraction": inputs.extraction.model_copy(update=extraction_update),
    })
