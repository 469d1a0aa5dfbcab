from sqlalchemy.orm import Session
from app.core.config import settings
from app.models.user import User
import logging

logger = logging.getLogger(__name__)

DEMO_USER = {
    "username": "demo",
    "full_name": "Sarah Johnson",
    "email": "sarah@example.com",
    "plan_type": "Premium",
}

def seed_demo_user(db: Session) -> User:
    user = db.query(User).filter(User.id == settings.DEMO_USER_ID).first()
    if user:
        return user

    user = User(id=settings.DEMO_USER_ID, **DEMO_USER)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created demo user {user.username} (id={user.id})")
    return user
