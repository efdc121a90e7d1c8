import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from database.init_db import init_db
from utils.logging import setup_logging

# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ routers
from routers import (
    assignments, attendance, grades, grading_schemes,
    service_hours, students, subjects, terms,
)

setup_logging(settings.LOG_LEVEL, settings.REQUEST_LOG_JSON)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
    )

    # ✅ CORS for the forms-and-tables frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ request latency (X-Latency-Ms response header)
    app.add_middleware(TimingMiddleware)

    # ✅ {"error": "..."} bodies for every failure
    add_error_handlers(app)

    # ✅ /api prefix
    app.include_router(students.router,        prefix="/api")
    app.include_router(subjects.router,        prefix="/api")
    app.include_router(terms.router,           prefix="/api")
    app.include_router(assignments.router,     prefix="/api")
    app.include_router(grades.router,          prefix="/api")
    app.include_router(attendance.router,      prefix="/api")
    app.include_router(service_hours.router,   prefix="/api")
    app.include_router(grading_schemes.router, prefix="/api")

    # ✅ health check
    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "API is running"}

    @app.on_event("startup")
    def _create_tables():
        init_db()
        logger.info("%s %s started (env=%s)", settings.APP_TITLE, settings.APP_VERSION, settings.ENV)

    return app


app = create_app()
