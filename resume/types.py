from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from content.types import ResumeKind, ResumeQuality


@dataclass(frozen=True, slots=True)
class ResumeItem:
    id: str
    kind: ResumeKind
    name: str
    score: int
    quality: ResumeQuality

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind,
            "name": self.name,
            "score": int(self.score),
            "quality": self.quality,
        }


def total_score(items: Iterable[ResumeItem]) -> int:
    return sum(int(i.score) for i in items)
