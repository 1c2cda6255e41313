from .enums import (
    BuildRole,
    CostCategory,
    DocumentType,
    MarginKind,
    QualityTier,
    StageName,
    VarianceStatus,
)
from .inputs import (
    BenchmarkAssumptions,
    BuildTeamAssumptions,
    DayRates,
    DocumentTypeValues,
    ExtractionAssumptions,
    Inputs,
    MarginTag,
    OpexAssumptions,
    QualityAssumptions,
    QualityTierValues,
    ScanningAssumptions,
    ScenarioConfig,
    VolumeAssumptions,
)
from .schemas import (
    BenchmarkComparison,
    BuildCosts,
    CategoryTotal,
    ComponentPrices,
    CostComponent,
    CostDrivers,
    IngestionCosts,
    LineItem,
    OpexCosts,
    PricedComponent,
    QuoteModel,
    ScanningResult,
    ValidationReport,
    VarianceResult,
    VolumeResult,
)

__all__ = [
    "BuildRole",
    "CostCategory",
    "DocumentType",
    "MarginKind",
    "QualityTier",
    "StageName",
    "VarianceStatus",
    "BenchmarkAssumptions",
    "BuildTeamAssumptions",
    "DayRates",
    "DocumentTypeValues",
    "ExtractionAssumptions",
    "Inputs",
    "MarginTag",
    "OpexAssumptions",
    "QualityAssumptions",
    "QualityTierValues",
    "ScanningAssumptions",
    "ScenarioConfig",
    "VolumeAssumptions",
    "BenchmarkComparison",
    "BuildCosts",
    "CategoryTotal",
    "ComponentPrices",
    "CostComponent",
    "CostDrivers",
    "IngestionCosts",
    "LineItem",
    "OpexCosts",
    "PricedComponent",
    "QuoteModel",
    "ScanningResult",
    "ValidationReport",
    "VarianceResult",
    "VolumeResult",
]
