from datetime import datetime
from typing import Optional
from app.schemas.base import CamelModel

class ExpenseBase(CamelModel):
    description: str
    amount: float
    date: datetime
    category: Optional[str] = None
    is_income: bool = False
    client_id: Optional[int] = None
    project_id: Optional[int] = None

class ExpenseCreate(ExpenseBase):
    pass

class ExpenseUpdate(CamelModel):
    description: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[datetime] = None
    category: Optional[str] = None
    is_income: Optional[bool] = None
    client_id: Optional[int] = None
    project_id: Optional[int] = None

class Expense(ExpenseBase):
    id: int
    user_id: int
