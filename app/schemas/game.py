from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


class NewGameRequest(BaseModel):
    seed: Optional[int] = None


class IntentRequest(BaseModel):
    type: str
    background: Optional[str] = None
    name: Optional[str] = None
    course_id: Optional[str] = None
    index: Optional[int] = None
    mentor_id: Optional[str] = None
    university: Optional[str] = None
    option_index: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        return {k: v for k, v in self.model_dump().items() if v is not None}
