from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel

class ProjectBase(CamelModel):
    name: str
    description: Optional[str] = None
    client_id: int
    status: Optional[str] = "active"
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    client_id: Optional[int] = None
    status: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

class Project(ProjectBase):
    id: int
    user_id: int
