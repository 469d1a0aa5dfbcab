from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    # Credentials are not managed by this service yet
    hashed_password = Column(String, nullable=True)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    plan_type = Column(String, default="basic")
    avatar_url = Column(String, nullable=True)

    clients = relationship("Client", back_populates="user", cascade="all, delete-orphan")
    business_plans = relationship("BusinessPlan", back_populates="user", cascade="all, delete-orphan")
