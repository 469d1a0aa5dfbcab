from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.models.user import User
from app.schemas.user import User as UserSchema
from app.core.config import settings

router = APIRouter()

# No login flow yet: every request acts as the configured demo user.
async def find_current_user(db: Session = Depends(get_db)) -> Optional[User]:
    return db.query(User).filter(User.id == settings.DEMO_USER_ID).first()

async def get_current_user(user: Optional[User] = Depends(find_current_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not resolve the current user"
        )
    return user

@router.get("", response_model=UserSchema)
async def read_current_user(user: Optional[User] = Depends(find_current_user)):
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
