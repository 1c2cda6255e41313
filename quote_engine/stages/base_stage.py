"""
Base stage class that every pricing pipeline stage inherits.

Design:
  - `process()` is called by the LangGraph node.
  - `_real_process()` is the single abstract method, overridden by each stage.
  - Stages are pure: they read the state, write only their owned fields
    and return it.  Failures are logged and re-raised, never swallowed.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

from quote_engine.models.enums import StageName
from quote_engine.models.state import QuoteGraphState

logger = logging.getLogger(__name__)


class BaseStage(ABC):
    """Abstract base for all pricing stages."""

    name: StageName  # set in each subclass

    # ── Public entry point (called by LangGraph node) ────

    def process(self, state: dict[str, Any]) -> dict[str, Any]:
        """
        LangGraph calls this as the node function.
        Accepts and returns a dict so LangGraph can carry the state forward.
        """
        t0 = time.perf_counter()
        logger.info(f"▶ [{self.name.value}] STARTING")
        _log_state_summary("INPUT STATE", state)

        graph_state = QuoteGraphState(**state)
        graph_state.current_stage = self.name.value

        try:
            updated = self._real_process(graph_state)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - t0) * 1000
            logger.exception(f"✘ [{self.name.value}] FAILED after {elapsed_ms:.2f}ms: {exc}")
            raise

        elapsed_ms = (time.perf_counter() - t0) * 1000
        updated.log_stage(
            stage=self.name.value,
            action="completed",
            details=self._summary(updated),
            elapsed_ms=elapsed_ms,
        )
        logger.info(f"✔ [{self.name.value}] COMPLETED in {elapsed_ms:.2f}ms")

        out = updated.model_dump()
        _log_state_summary("OUTPUT STATE", out)
        return out

    # ── Subclass hooks ───────────────────────────────────

    @abstractmethod
    def _real_process(self, state: QuoteGraphState) -> QuoteGraphState:
        ...

    def _summary(self, state: QuoteGraphState) -> str:
        """One-line description of what the stage produced, for the stage trail."""
        return ""


# ── Debug helpers (module-level) ─────────────────────────

def _log_state_summary(label: str, state: dict[str, Any]) -> None:
    """Log which state fields are populated."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    lines = [f"  ┌─ {label}"]
    for key in sorted(state.keys()):
        val = state[key]
        if val is None or val == [] or val == "":
            lines.append(f"  │  {key}: <empty>")
        elif isinstance(val, list):
            lines.append(f"  │  {key}: list({len(val)} items)")
        elif isinstance(val, dict):
            lines.append(f"  │  {key}: dict({len(val)} keys)")
        else:
            lines.append(f"  │  {key}: {type(val).__name__} = {val}")
    lines.append(f"  └─ ({len(state)} keys total)")
    logger.debug("\n".join(lines))
