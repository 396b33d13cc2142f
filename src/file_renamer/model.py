from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class RenameStatus(enum.Enum):
    RENAMED = "renamed"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RenameOutcome:
    source: Path
    target: Path
    status: RenameStatus
    error: str = ""


@dataclass(slots=True)
class RenameReport:
    outcomes: list[RenameOutcome] = field(default_factory=list)

    @property
    def renamed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status is RenameStatus.RENAMED)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status is RenameStatus.FAILED)
