from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.models.user import User
from app.models.task import Task
from app.models.activity import ActivityType
from app.schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate
from app.services.activity_feed import record_activity
from app.api.projects import check_references
from app.api.validation import reject_nulls

router = APIRouter()

def get_owned_task(db: Session, task_id: int, user: User) -> Task:
    task = db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == user.id
    ).first()

    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task

@router.get("", response_model=list[TaskSchema])
async def get_tasks(
    completed: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(Task).filter(Task.user_id == current_user.id)

    # Anything other than "true"/"false" means no filter
    if completed == "true":
        query = query.filter(Task.completed.is_(True))
    elif completed == "false":
        query = query.filter(Task.completed.is_(False))

    return query.order_by(Task.due_date.is_(None), Task.due_date, Task.id).all()

@router.get("/{task_id}", response_model=TaskSchema)
async def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_owned_task(db, task_id, current_user)

@router.post("", response_model=TaskSchema, status_code=201)
async def create_task(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    data = payload.model_dump()
    check_references(db, data, current_user)

    task = Task(**data, user_id=current_user.id)
    db.add(task)
    db.commit()
    db.refresh(task)

    return task

@router.put("/{task_id}", response_model=TaskSchema)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, task_id, current_user)
    changes = reject_nulls(payload.model_dump(exclude_unset=True), ("title",))
    check_references(db, changes, current_user)
    just_completed = bool(changes.get("completed")) and not task.completed

    for field, value in changes.items():
        setattr(task, field, value)

    if just_completed:
        record_activity(
            db,
            user_id=current_user.id,
            activity_type=ActivityType.TASK_COMPLETED,
            description=f"Task completed: {task.title}",
            entity_id=task.id,
            entity_type="task"
        )

    db.commit()
    db.refresh(task)
    return task

@router.delete("/{task_id}")
async def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = get_owned_task(db, task_id, current_user)
    db.delete(task)
    db.commit()

    return {"success": True}
