from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel

class TaskBase(CamelModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    completed: bool = False
    project_id: Optional[int] = None
    client_id: Optional[int] = None

class TaskCreate(TaskBase):
    pass

class TaskUpdate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    completed: Optional[bool] = None
    project_id: Optional[int] = None
    client_id: Optional[int] = None

class Task(TaskBase):
    id: int
    user_id: int
