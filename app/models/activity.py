import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from app.db.database import Base

class ActivityType(str, enum.Enum):
    CLIENT_CREATED = "client_created"
    PROJECT_CREATED = "project_created"
    BUSINESS_PLAN_CREATED = "business_plan_created"
    BUSINESS_PLAN_UPDATED = "business_plan_updated"
    EXPENSE_CREATED = "expense_created"
    TASK_COMPLETED = "task_completed"

class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String, nullable=False)
    description = Column(String, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    entity_id = Column(Integer, nullable=True)
    entity_type = Column(String, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
