"""
Planboard - project and task tracking with working-day auto-scheduling.
"""

from fastapi import FastAPI
from contextlib import asynccontextmanager

from planboard.database import init_db
from planboard.routes import projects, schedule, tasks, users
from planboard.exceptions import register_exception_handlers
from planboard.logging_config import setup_logging, get_logger

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting Planboard API...")
    await init_db()
    logger.info("Database initialized")
    yield
    logger.info("Shutting down Planboard API...")


app = FastAPI(
    title="Planboard",
    description="Owner-scoped projects and tasks with working-day auto-scheduling",
    version="0.1.0",
    lifespan=lifespan,
)

# Register custom exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(projects.router, prefix="/projects", tags=["Projects"])
app.include_router(schedule.router, prefix="/projects", tags=["Scheduler"])
app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
