"""
Application entry point.

``create_app`` configures logging, registers the routers and error
handlers, and creates the database tables on startup.  The module-level
``app`` lets uvicorn discover the application::

    uvicorn blog_api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import make_url

from .api.errors import register_exception_handlers
from .api.routers import posts
from .core.config import settings
from .core.logging_config import setup_logging
from .db.base import Base
from .db.session import engine

logger = logging.getLogger(__name__)

router_modules = [
    posts.router,
]


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(
        "%s %s is running against %s",
        settings.project_name,
        settings.api_version,
        make_url(settings.database_url).get_backend_name(),
    )
    yield
    engine.dispose()


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=settings.api_version,
        lifespan=lifespan,
    )
    register_exception_handlers(app)

    for router in router_modules:
        app.include_router(router)

    @app.get("/")
    async def root() -> dict:
        return {"message": f"{settings.project_name} is ready"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
