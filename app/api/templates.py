from typing import Optional
from fastapi import APIRouter, HTTPException, Query
from app.core.exceptions import InvalidTemplateError
from app.schemas.template import TemplateInfo, ResolvedTemplate, CustomTemplateCreate
from app.templates.catalog import (
    build_custom_template_id,
    is_custom_template,
    list_templates,
    resolve_sections,
    template_display_name,
)

router = APIRouter()

@router.get("", response_model=list[TemplateInfo])
async def get_templates():
    return list_templates()

@router.get("/sections", response_model=ResolvedTemplate)
async def get_template_sections(template_id: Optional[str] = Query(None, alias="templateId")):
    return {
        "template_id": template_id,
        "name": template_display_name(template_id),
        "custom": is_custom_template(template_id),
        "sections": resolve_sections(template_id),
    }

@router.post("/custom", response_model=ResolvedTemplate, status_code=201)
async def create_custom_template(payload: CustomTemplateCreate):
    try:
        template_id = build_custom_template_id(payload.name, payload.sections)
    except InvalidTemplateError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "template_id": template_id,
        "name": template_display_name(template_id),
        "custom": True,
        "sections": resolve_sections(template_id),
    }
