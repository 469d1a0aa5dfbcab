from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.db.database import get_db
from app.api.auth import get_current_user
from app.models.user import User
from app.models.client import Client
from app.models.expense import Expense
from app.models.task import Task
from app.models.business_plan import BusinessPlan, PlanStatus
from app.schemas.dashboard import DashboardStats
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    try:
        now = datetime.now(timezone.utc)
        first_day_of_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        monthly_revenue = db.query(func.coalesce(func.sum(Expense.amount), 0.0)).filter(
            Expense.user_id == current_user.id,
            Expense.is_income.is_(True),
            Expense.date >= first_day_of_month
        ).scalar()

        client_count = db.query(func.count(Client.id)).filter(
            Client.user_id == current_user.id
        ).scalar()

        plan_counts = dict(
            db.query(BusinessPlan.status, func.count(BusinessPlan.id)).filter(
                BusinessPlan.user_id == current_user.id
            ).group_by(BusinessPlan.status).all()
        )

        open_task_count = db.query(func.count(Task.id)).filter(
            Task.user_id == current_user.id,
            Task.completed.is_(False)
        ).scalar()

        return {
            "monthly_revenue": float(monthly_revenue or 0.0),
            "client_count": client_count,
            "plan_count": sum(plan_counts.values()),
            "active_plan_count": plan_counts.get(PlanStatus.ACTIVE.value, 0),
            "draft_plan_count": plan_counts.get(PlanStatus.DRAFT.value, 0),
            "open_task_count": open_task_count,
        }
    except Exception as e:
        logger.error(f"Error generating dashboard stats: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail="Error generating dashboard stats"
        )
