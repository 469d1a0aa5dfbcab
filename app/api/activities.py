from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.core.config import settings
from app.models.user import User
from app.schemas.activity import Activity as ActivitySchema
from app.services.activity_feed import recent_activities

router = APIRouter()

@router.get("", response_model=list[ActivitySchema])
async def get_activities(
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return recent_activities(db, current_user.id, limit or settings.ACTIVITY_FEED_LIMIT)
