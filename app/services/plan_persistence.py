from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session
from app.core.exceptions import PlanNotFoundError, PlanValidationError
from app.models.activity import ActivityType
from app.models.business_plan import BusinessPlan, PlanStatus
from app.models.client import Client
from app.services.activity_feed import record_activity
import logging

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "template", "client_id", "content", "status")


@dataclass
class BusinessPlanDocument:
    name: str
    template: Optional[str] = None
    client_id: Optional[int] = None
    content: Optional[str] = None
    status: str = PlanStatus.DRAFT.value
    last_updated: Optional[datetime] = None
    id: Optional[int] = None
    user_id: Optional[int] = None

    @classmethod
    def from_model(cls, plan: BusinessPlan) -> "BusinessPlanDocument":
        return cls(
            id=plan.id,
            name=plan.name,
            template=plan.template,
            client_id=plan.client_id,
            content=plan.content,
            status=plan.status,
            last_updated=plan.last_updated,
            user_id=plan.user_id
        )

    def changes(self) -> dict:
        data = asdict(self)
        return {field: data[field] for field in EDITABLE_FIELDS}


def normalize_status(status) -> str:
    if status is None:
        return PlanStatus.DRAFT.value
    try:
        return PlanStatus(status).value
    except ValueError:
        allowed = ", ".join(s.value for s in PlanStatus)
        raise PlanValidationError(f"Invalid status {status!r}; expected one of: {allowed}")


class PlanPersistenceAdapter(ABC):
    @abstractmethod
    async def load(self, plan_id: int) -> Optional[BusinessPlanDocument]:
        pass

    @abstractmethod
    async def create(self, document: BusinessPlanDocument) -> BusinessPlanDocument:
        pass

    @abstractmethod
    async def update(self, plan_id: int, document: BusinessPlanDocument) -> BusinessPlanDocument:
        pass


class SqlAlchemyPlanPersistence(PlanPersistenceAdapter):
    """Business plans owned by a single user, stored through a SQLAlchemy session."""

    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _check_client(self, client_id: Optional[int]) -> None:
        if client_id is None:
            return
        client = self.db.query(Client).filter(
            Client.id == client_id,
            Client.user_id == self.user_id
        ).first()
        if client is None:
            raise PlanValidationError(f"Client {client_id} not found")

    def _get_owned(self, plan_id: int) -> Optional[BusinessPlan]:
        return self.db.query(BusinessPlan).filter(
            BusinessPlan.id == plan_id,
            BusinessPlan.user_id == self.user_id
        ).first()

    async def list_plans(self) -> list[BusinessPlanDocument]:
        plans = self.db.query(BusinessPlan).filter(
            BusinessPlan.user_id == self.user_id
        ).order_by(BusinessPlan.id).all()
        return [BusinessPlanDocument.from_model(plan) for plan in plans]

    async def load(self, plan_id: int) -> Optional[BusinessPlanDocument]:
        plan = self._get_owned(plan_id)
        if plan is None:
            return None
        return BusinessPlanDocument.from_model(plan)

    async def create(self, document: BusinessPlanDocument) -> BusinessPlanDocument:
        if not document.name or not document.name.strip():
            raise PlanValidationError("Business plan name is required")
        self._check_client(document.client_id)

        plan = BusinessPlan(
            name=document.name,
            template=document.template,
            client_id=document.client_id,
            content=document.content,
            status=normalize_status(document.status),
            last_updated=datetime.now(timezone.utc),
            user_id=self.user_id
        )
        try:
            self.db.add(plan)
            self.db.flush()
            record_activity(
                self.db,
                user_id=self.user_id,
                activity_type=ActivityType.BUSINESS_PLAN_CREATED,
                description=f"New business plan created: {plan.name}",
                entity_id=plan.id,
                entity_type="business_plan"
            )
            self.db.commit()
        except Exception as e:
            logger.error(f"Error creating business plan: {str(e)}")
            self.db.rollback()
            raise
        self.db.refresh(plan)

        return BusinessPlanDocument.from_model(plan)

    async def update(self, plan_id: int, document: BusinessPlanDocument) -> BusinessPlanDocument:
        return await self.apply_changes(plan_id, document.changes())

    async def apply_changes(self, plan_id: int, changes: dict) -> BusinessPlanDocument:
        """Partial update. ``last_updated`` is always set to the server time."""
        plan = self._get_owned(plan_id)
        if plan is None:
            raise PlanNotFoundError(plan_id)

        validated = {}
        for field, value in changes.items():
            if field not in EDITABLE_FIELDS:
                continue
            if field == "status":
                value = normalize_status(value)
            if field == "name" and (value is None or not str(value).strip()):
                raise PlanValidationError("Business plan name is required")
            validated[field] = value

        if "client_id" in validated:
            self._check_client(validated["client_id"])

        previous_name = plan.name
        for field, value in validated.items():
            setattr(plan, field, value)
        plan.last_updated = datetime.now(timezone.utc)

        try:
            record_activity(
                self.db,
                user_id=self.user_id,
                activity_type=ActivityType.BUSINESS_PLAN_UPDATED,
                description=f"Updated business plan: {previous_name}",
                entity_id=plan.id,
                entity_type="business_plan"
            )
            self.db.commit()
        except Exception as e:
            logger.error(f"Error updating business plan {plan_id}: {str(e)}")
            self.db.rollback()
            raise
        self.db.refresh(plan)

        return BusinessPlanDocument.from_model(plan)

    async def delete(self, plan_id: int) -> bool:
        plan = self._get_owned(plan_id)
        if plan is None:
            return False
        self.db.delete(plan)
        self.db.commit()
        return True
