from enum import Enum


class CostCategory(str, Enum):
    INGESTION = "ingestion"
    BUILD = "build"
    OPEX = "opex"


class MarginKind(str, Enum):
    LABOR = "labor"
    PASSTHROUGH = "passthrough"
    CLIENT_DIRECT = "client_direct"
    FIXED_OVERRIDE = "fixed_override"


class VarianceStatus(str, Enum):
    ON_TARGET = "on_target"
    NEAR_TARGET = "near_target"
    BELOW_TARGET = "below_target"


class DocumentType(str, Enum):
    LEASE = "lease"
    DEED = "deed"
    LICENCE = "licence"
    PLAN = "plan"


class QualityTier(str, Enum):
    GOOD = "good"
    MEDIUM = "medium"
    POOR = "poor"


class BuildRole(str, Enum):
    SOLUTION_ARCHITECT = "solution_architect"
    ML_ENGINEER = "ml_engineer"
    BACKEND_ENGINEER = "backend_engineer"
    FRONTEND_ENGINEER = "frontend_engineer"
    DEVOPS_ENGINEER = "devops_engineer"
    QA_ENGINEER = "qa_engineer"
    PROJECT_MANAGER = "project_manager"


class StageName(str, Enum):
    DERIVE_VOLUMES = "derive_volumes"
    ESTIMATE_SCANNING = "estimate_scanning"
    COST_INGESTION = "cost_ingestion"
    COST_BUILD = "cost_build"
    COST_OPEX = "cost_opex"
    PRICE_COMPONENTS = "price_components"
    GENERATE_LINE_ITEMS = "generate_line_items"
    AGGREGATE = "aggregate"
