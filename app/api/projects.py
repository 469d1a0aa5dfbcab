from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.api.clients import get_owned_client
from app.models.user import User
from app.models.project import Project
from app.models.activity import ActivityType
from app.schemas.project import Project as ProjectSchema, ProjectCreate, ProjectUpdate
from app.services.activity_feed import record_activity
from app.api.validation import reject_nulls

router = APIRouter()

def get_owned_project(db: Session, project_id: int, user: User) -> Project:
    project = db.query(Project).filter(
        Project.id == project_id,
        Project.user_id == user.id
    ).first()

    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project

def check_references(db: Session, data: dict, user: User) -> None:
    """Linked client and project must exist and belong to the user."""
    if data.get("client_id") is not None:
        get_owned_client(db, data["client_id"], user)
    if data.get("project_id") is not None:
        get_owned_project(db, data["project_id"], user)

@router.get("", response_model=list[ProjectSchema])
async def get_projects(
    client_id: Optional[int] = Query(None, alias="clientId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    query = db.query(Project).filter(Project.user_id == current_user.id)
    if client_id is not None:
        query = query.filter(Project.client_id == client_id)

    return query.order_by(Project.id).all()

@router.get("/{project_id}", response_model=ProjectSchema)
async def get_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_owned_project(db, project_id, current_user)

@router.post("", response_model=ProjectSchema, status_code=201)
async def create_project(
    payload: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_client(db, payload.client_id, current_user)

    project = Project(**payload.model_dump(), user_id=current_user.id)
    db.add(project)
    db.flush()

    record_activity(
        db,
        user_id=current_user.id,
        activity_type=ActivityType.PROJECT_CREATED,
        description=f"New project created: {project.name}",
        entity_id=project.id,
        entity_type="project"
    )
    db.commit()
    db.refresh(project)

    return project

@router.put("/{project_id}", response_model=ProjectSchema)
async def update_project(
    project_id: int,
    payload: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    project = get_owned_project(db, project_id, current_user)
    changes = reject_nulls(payload.model_dump(exclude_unset=True), ("name", "client_id"))
    if changes.get("client_id") is not None:
        get_owned_client(db, changes["client_id"], current_user)

    for field, value in changes.items():
        setattr(project, field, value)

    db.commit()
    db.refresh(project)
    return project

@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    project = get_owned_project(db, project_id, current_user)
    db.delete(project)
    db.commit()

    return {"success": True}
