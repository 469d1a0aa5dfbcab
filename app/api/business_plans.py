from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.core.exceptions import ContentDecodeError, PlanNotFoundError, PlanValidationError
from app.models.user import User
from app.models.client import Client
from app.schemas.business_plan import (
    BusinessPlan as BusinessPlanSchema,
    BusinessPlanCreate,
    BusinessPlanUpdate,
    PlanSections,
    PlanSectionsUpdate,
)
from app.services.plan_editor import PlanEditorSession
from app.services.plan_export import render_html, render_markdown
from app.services.plan_persistence import BusinessPlanDocument, SqlAlchemyPlanPersistence
from app.templates.catalog import template_display_name
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def get_plan_persistence(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
) -> SqlAlchemyPlanPersistence:
    return SqlAlchemyPlanPersistence(db, current_user.id)

async def open_session(persistence: SqlAlchemyPlanPersistence, plan_id: int) -> PlanEditorSession:
    try:
        return await PlanEditorSession.open(persistence, plan_id)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Business plan not found")
    except ContentDecodeError as e:
        logger.error(f"Business plan {plan_id} has corrupted content: {str(e)}")
        raise HTTPException(status_code=422, detail=str(e))

def sections_view(session: PlanEditorSession) -> dict:
    return {
        "id": session.plan_id,
        "template": session.template,
        "template_name": template_display_name(session.template),
        "sections": [
            {"name": name, "content": session.content.get_content(name)}
            for name in session.sections
        ],
        "selected_section": session.selected_section,
        "retained_sections": session.retained_sections(),
    }

@router.get("", response_model=list[BusinessPlanSchema])
async def get_business_plans(
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    return await persistence.list_plans()

@router.get("/{plan_id}", response_model=BusinessPlanSchema)
async def get_business_plan(
    plan_id: int,
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    document = await persistence.load(plan_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Business plan not found")
    return document

@router.post("", response_model=BusinessPlanSchema, status_code=201)
async def create_business_plan(
    payload: BusinessPlanCreate,
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    document = BusinessPlanDocument(
        name=payload.name,
        template=payload.template,
        client_id=payload.client_id,
        content=payload.content,
        status=payload.status.value
    )
    try:
        return await persistence.create(document)
    except PlanValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.put("/{plan_id}", response_model=BusinessPlanSchema)
async def update_business_plan(
    plan_id: int,
    payload: BusinessPlanUpdate,
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    changes = payload.model_dump(exclude_unset=True)
    changes.pop("last_updated", None)
    try:
        return await persistence.apply_changes(plan_id, changes)
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Business plan not found")
    except PlanValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.delete("/{plan_id}")
async def delete_business_plan(
    plan_id: int,
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    deleted = await persistence.delete(plan_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Business plan not found")
    return {"success": True}

@router.get("/{plan_id}/sections", response_model=PlanSections)
async def get_plan_sections(
    plan_id: int,
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    session = await open_session(persistence, plan_id)
    return sections_view(session)

@router.patch("/{plan_id}/sections", response_model=PlanSections)
async def update_plan_sections(
    plan_id: int,
    payload: PlanSectionsUpdate,
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    session = await open_session(persistence, plan_id)

    try:
        if payload.template is not None:
            session.change_template(payload.template)
        if payload.selected_section is not None:
            session.select_section(payload.selected_section)
        for name, text in (payload.sections or {}).items():
            session.set_section_content(name, text)

        await session.save(persistence)
    except PlanValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlanNotFoundError:
        raise HTTPException(status_code=404, detail="Business plan not found")

    return sections_view(session)

@router.get("/{plan_id}/export")
async def export_business_plan(
    plan_id: int,
    format: str = Query("markdown", pattern="^(markdown|html)$"),
    persistence: SqlAlchemyPlanPersistence = Depends(get_plan_persistence)
):
    session = await open_session(persistence, plan_id)

    client_name = None
    if session.client_id is not None:
        client = persistence.db.query(Client).filter(
            Client.id == session.client_id,
            Client.user_id == persistence.user_id
        ).first()
        client_name = client.name if client else None

    if format == "html":
        return HTMLResponse(render_html(session, client_name))
    return PlainTextResponse(render_markdown(session, client_name), media_type="text/markdown")
