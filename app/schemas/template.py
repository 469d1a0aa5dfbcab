from typing import Optional
from pydantic import Field
from app.schemas.base import CamelModel

class TemplateInfo(CamelModel):
    id: str
    name: str
    description: str
    sections: list[str]

class ResolvedTemplate(CamelModel):
    template_id: Optional[str] = None
    name: str
    custom: bool
    sections: list[str]

class CustomTemplateCreate(CamelModel):
    name: str
    sections: list[str] = Field(min_length=1)
