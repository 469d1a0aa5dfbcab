from app.schemas.base import CamelModel

class DashboardStats(CamelModel):
    monthly_revenue: float
    client_count: int
    plan_count: int
    active_plan_count: int
    draft_plan_count: int
    open_task_count: int
