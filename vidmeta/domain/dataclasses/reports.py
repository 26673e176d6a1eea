# vidmeta/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from vidmeta.domain.dataclasses.items import PipelineItem


# ---------------------------------------------------------------------------
# Base report (shared fields + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - error capture: error_details
    - helpers: start(), stop(), add_error()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    # Each tuple is (subject, message)
    error_details: List[Tuple[str, str]] = field(default_factory=list)

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def add_error(self, subject: str, message: str) -> None:
        self.error_details.append((subject, message))


# ---------------------------------------------------------------------------
# Per-item outcome
# ---------------------------------------------------------------------------
@dataclass
class ItemOutcome:
    """Success (result set) or captured failure (error set) for one input item."""
    index: int
    item: PipelineItem
    output_property: str
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_output(self) -> Dict[str, Any]:
        if not self.ok:
            # failed items carry the error annotation and lose their payloads
            return {"json": {**self.item.json, "error": self.error}}
        return {
            "json": {**self.item.json, self.output_property: self.result},
            "binary": dict(self.item.binary),
        }


# ---------------------------------------------------------------------------
# Extraction run report
# ---------------------------------------------------------------------------
@dataclass
class ExtractReport(BaseReport):
    planned: int = 0
    succeeded: int = 0
    errors: int = 0
    outcomes: List[ItemOutcome] = field(default_factory=list)

    def record(self, outcome: ItemOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.ok:
            self.succeeded += 1
        else:
            self.errors += 1
            self.add_error(f"item[{outcome.index}]", outcome.error or "")

    @property
    def ok(self) -> bool:
        return self.errors == 0

    def output_items(self) -> List[Dict[str, Any]]:
        return [o.to_output() for o in self.outcomes]
