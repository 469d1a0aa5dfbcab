from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.models.user import User
from app.models.expense import Expense
from app.models.activity import ActivityType
from app.schemas.expense import Expense as ExpenseSchema, ExpenseCreate, ExpenseUpdate
from app.services.activity_feed import record_activity
from app.api.projects import check_references
from app.api.validation import reject_nulls

router = APIRouter()

def get_owned_expense(db: Session, expense_id: int, user: User) -> Expense:
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.user_id == user.id
    ).first()

    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense

@router.get("", response_model=list[ExpenseSchema])
async def get_expenses(
    client_id: Optional[int] = Query(None, alias="clientId"),
    project_id: Optional[int] = Query(None, alias="projectId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(Expense).filter(Expense.user_id == current_user.id)
    if client_id is not None:
        query = query.filter(Expense.client_id == client_id)
    if project_id is not None:
        query = query.filter(Expense.project_id == project_id)

    return query.order_by(Expense.date.desc(), Expense.id.desc()).all()

@router.get("/{expense_id}", response_model=ExpenseSchema)
async def get_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_owned_expense(db, expense_id, current_user)

@router.post("", response_model=ExpenseSchema, status_code=201)
async def create_expense(
    payload: ExpenseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    data = payload.model_dump()
    check_references(db, data, current_user)

    expense = Expense(**data, user_id=current_user.id)
    db.add(expense)
    db.flush()

    kind = "income" if expense.is_income else "expense"
    record_activity(
        db,
        user_id=current_user.id,
        activity_type=ActivityType.EXPENSE_CREATED,
        description=f"New {kind} recorded: ${expense.amount:.2f}",
        entity_id=expense.id,
        entity_type="expense"
    )
    db.commit()
    db.refresh(expense)

    return expense

@router.put("/{expense_id}", response_model=ExpenseSchema)
async def update_expense(
    expense_id: int,
    payload: ExpenseUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    expense = get_owned_expense(db, expense_id, current_user)

    changes = reject_nulls(
        payload.model_dump(exclude_unset=True),
        ("description", "amount", "date")
    )
    check_references(db, changes, current_user)

    for field, value in changes.items():
        setattr(expense, field, value)

    db.commit()
    db.refresh(expense)
    return expense

@router.delete("/{expense_id}")
async def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    expense = get_owned_expense(db, expense_id, current_user)
    db.delete(expense)
    db.commit()

    return {"success": True}
