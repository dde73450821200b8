from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class HistoryEntry(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str
    kind: str
    created_at: Optional[str]


class HistoryPageResponse(BaseModel):
    entries: List[HistoryEntry]
    next_cursor: Optional[str]
    has_more: bool
