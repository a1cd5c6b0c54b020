import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from todo_service.api.v1.routers import router as api_router
from todo_service.core.config import settings
from todo_service.core.database import init_db, seed_db
from todo_service.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting up %s", settings.APP_NAME)

    # create tables unless the schema is managed elsewhere
    if not settings.SKIP_DB_INIT:
        init_db()

    # seed an empty database (development only)
    if settings.SEED_DB:
        seed_db()

    yield
    logger.info("Shutting down %s", settings.APP_NAME)


app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)


@app.get("/")
def health_check():
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "todo_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
