# tagcontent/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Base report (shared fields + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - helpers: start(), stop(), as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Tag seeding report
# ---------------------------------------------------------------------------
@dataclass
class SeedReport(BaseReport):
    seeded: List[str] = field(default_factory=list)       # default tags written into empty storage
    backfilled: List[str] = field(default_factory=list)   # legacy tags given an expected media type

    @property
    def changed(self) -> bool:
        return bool(self.seeded or self.backfilled)
