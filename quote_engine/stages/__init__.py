from .aggregate_stage import AggregateStage
from .base_stage import BaseStage
from .build_stage import BuildStage
from .ingestion_stage import IngestionStage
from .line_item_stage import LineItemStage
from .opex_stage import OpexStage
from .pricing_stage import PricingStage
from .scanning_stage import ScanningStage
from .volume_stage import VolumeStage

__all__ = [
    "AggregateStage",
    "BaseStage",
    "BuildStage",
    "IngestionStage",
    "LineItemStage",
    "OpexStage",
    "PricingStage",
    "ScanningStage",
    "VolumeStage",
]
