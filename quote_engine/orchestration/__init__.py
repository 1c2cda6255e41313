from .engine import QuoteEngine
from .graph import build_graph, compute_model, run_pipeline
from .transitions import route_after_volumes

__all__ = ["QuoteEngine", "build_graph", "compute_model", "run_pipeline", "route_after_volumes"]
