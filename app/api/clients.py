from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.models.user import User
from app.models.client import Client
from app.models.activity import ActivityType
from app.schemas.client import Client as ClientSchema, ClientCreate, ClientUpdate
from app.services.activity_feed import record_activity
from app.api.validation import reject_nulls
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def get_owned_client(db: Session, client_id: int, user: User) -> Client:
    client = db.query(Client).filter(
        Client.id == client_id,
        Client.user_id == user.id
    ).first()

    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return client

@router.get("", response_model=list[ClientSchema])
async def get_clients(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return db.query(Client).filter(
        Client.user_id == current_user.id
    ).order_by(Client.id).all()

@router.get("/{client_id}", response_model=ClientSchema)
async def get_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_owned_client(db, client_id, current_user)

@router.post("", response_model=ClientSchema, status_code=201)
async def create_client(
    payload: ClientCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    client = Client(**payload.model_dump(), user_id=current_user.id)
    db.add(client)
    db.flush()

    record_activity(
        db,
        user_id=current_user.id,
        activity_type=ActivityType.CLIENT_CREATED,
        description=f"New client added: {client.name}",
        entity_id=client.id,
        entity_type="client"
    )
    db.commit()
    db.refresh(client)

    return client

@router.put("/{client_id}", response_model=ClientSchema)
async def update_client(
    client_id: int,
    payload: ClientUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    client = get_owned_client(db, client_id, current_user)

    changes = reject_nulls(payload.model_dump(exclude_unset=True), ("name",))
    for field, value in changes.items():
        setattr(client, field, value)

    db.commit()
    db.refresh(client)
    return client

@router.delete("/{client_id}")
async def delete_client(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    client = get_owned_client(db, client_id, current_user)
    db.delete(client)
    db.commit()

    return {"success": True}
