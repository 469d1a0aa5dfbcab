from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel

class Activity(CamelModel):
    id: int
    type: str
    description: str
    timestamp: datetime
    entity_id: Optional[int] = None
    entity_type: Optional[str] = None
    user_id: int
