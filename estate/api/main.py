"""
FastAPI app assembly: logging, router wiring and startup seeding.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from estate.db.database import SessionLocal
from estate.db.seed import seed_default_work_types
from estate.api.users import router as users_router, me_router
from estate.api.properties import router as properties_router
from estate.api.features import router as features_router
from estate.api.property_logs import router as property_logs_router
from estate.api.property_attachments import router as property_attachments_router
from estate.api.contacts import router as contacts_router
from estate.api.tasks import router as tasks_router
from estate.api.task_logs import router as task_logs_router
from estate.api.transactions import router as transactions_router
from estate.api.maintenance import router as maintenance_router
from estate.api.vendors import router as vendors_router
from estate.api.work_types import router as work_types_router

# Database schema is managed by Alembic migrations.


@asynccontextmanager
async def lifespan(_app: FastAPI):
    db = SessionLocal()
    try:
        seed_default_work_types(db)
    finally:
        db.close()
    yield


app = FastAPI(
    title="Property Management Service",
    description="API for managing properties, contacts, tasks, transactions, maintenance and vendors.",
    version="1.0.0",
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost,http://localhost:3000,http://localhost:8080").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)
app.include_router(me_router)
app.include_router(properties_router)
app.include_router(features_router)
app.include_router(property_logs_router)
app.include_router(property_attachments_router)
app.include_router(contacts_router)
app.include_router(tasks_router)
app.include_router(task_logs_router)
app.include_router(transactions_router)
app.include_router(maintenance_router)
app.include_router(vendors_router)
app.include_router(work_types_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
