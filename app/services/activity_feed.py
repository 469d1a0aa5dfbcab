from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session
from app.models.activity import Activity, ActivityType
import logging

logger = logging.getLogger(__name__)

def record_activity(
    db: Session,
    user_id: int,
    activity_type: ActivityType,
    description: str,
    entity_id: Optional[int] = None,
    entity_type: Optional[str] = None
) -> Activity:
    """Queue an activity on the session; the caller commits."""
    activity = Activity(
        type=activity_type.value,
        description=description,
        timestamp=datetime.now(timezone.utc),
        entity_id=entity_id,
        entity_type=entity_type,
        user_id=user_id
    )
    db.add(activity)
    logger.info(f"Activity {activity_type.value}: {description}")
    return activity

def recent_activities(db: Session, user_id: int, limit: Optional[int] = None) -> list[Activity]:
    query = db.query(Activity).filter(
        Activity.user_id == user_id
    ).order_by(Activity.timestamp.desc(), Activity.id.desc())

    if limit:
        query = query.limit(limit)

    return query.all()
