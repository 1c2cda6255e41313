"""Services — scenario comparison, ExportService, BaselineService."""

from quote_engine.services.baseline_service import BaselineService
from quote_engine.services.comparison_service import ScenarioComparisonRow, compare_scenarios
from quote_engine.services.export_service import ExportService

__all__ = ["BaselineService", "ExportService", "ScenarioComparisonRow", "compare_scenarios"]
