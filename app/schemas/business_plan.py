from datetime import datetime
from typing import Optional
from pydantic import Field
from app.models.business_plan import PlanStatus
from app.schemas.base import CamelModel

class BusinessPlanCreate(CamelModel):
    name: str
    template: Optional[str] = None
    client_id: Optional[int] = None
    content: Optional[str] = None
    status: PlanStatus = PlanStatus.DRAFT
    # Accepted for compatibility; the server always sets its own timestamp
    last_updated: Optional[datetime] = None

class BusinessPlanUpdate(CamelModel):
    name: Optional[str] = None
    template: Optional[str] = None
    client_id: Optional[int] = None
    content: Optional[str] = None
    status: Optional[PlanStatus] = None
    last_updated: Optional[datetime] = None

class BusinessPlan(CamelModel):
    id: int
    name: str
    template: Optional[str] = None
    client_id: Optional[int] = None
    content: Optional[str] = None
    status: str
    last_updated: Optional[datetime] = None
    user_id: int

class SectionEntry(CamelModel):
    name: str
    content: str

class PlanSections(CamelModel):
    id: int
    template: str
    template_name: str
    sections: list[SectionEntry]
    selected_section: str
    retained_sections: list[str] = Field(default_factory=list)

class PlanSectionsUpdate(CamelModel):
    template: Optional[str] = None
    selected_section: Optional[str] = None
    sections: Optional[dict[str, str]] = None
