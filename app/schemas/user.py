from typing import Optional
from app.schemas.base import CamelModel

class User(CamelModel):
    id: int
    username: str
    full_name: str
    email: str
    plan_type: Optional[str] = None
    avatar_url: Optional[str] = None
