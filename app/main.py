from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.db.database import SessionLocal, init_db
from app.db.seed import seed_demo_user
from app.api import (
    activities,
    auth,
    business_plans,
    clients,
    dashboard,
    expenses,
    projects,
    tasks,
    templates,
)
import logging

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    db = SessionLocal()
    try:
        seed_demo_user(db)
    finally:
        db.close()
    logger.info(f"{settings.PROJECT_NAME} started")
    yield

def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api = settings.API_PREFIX
    app.include_router(auth.router, prefix=f"{api}/user", tags=["user"])
    app.include_router(clients.router, prefix=f"{api}/clients", tags=["clients"])
    app.include_router(projects.router, prefix=f"{api}/projects", tags=["projects"])
    app.include_router(business_plans.router, prefix=f"{api}/business-plans", tags=["business-plans"])
    app.include_router(templates.router, prefix=f"{api}/templates", tags=["templates"])
    app.include_router(expenses.router, prefix=f"{api}/expenses", tags=["expenses"])
    app.include_router(tasks.router, prefix=f"{api}/tasks", tags=["tasks"])
    app.include_router(activities.router, prefix=f"{api}/activities", tags=["activities"])
    app.include_router(dashboard.router, prefix=f"{api}/dashboard", tags=["dashboard"])

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

app = create_app()
