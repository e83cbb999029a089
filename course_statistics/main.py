import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_statistics.core.config import settings
from course_statistics.core.exceptions import register_exception_handlers
from course_statistics.core.log_config import RequestLoggingMiddleware, setup_logging
from course_statistics.creator.routes import creator_statistics

setup_logging()
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    description="Dashboard statistics for content creators' courses",
    version="1.0.0",
)

register_exception_handlers(app, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(creator_statistics.router, prefix=settings.API_V1_PREFIX)

logger.info("app_configured", project=settings.PROJECT_NAME, debug=settings.DEBUG)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": settings.PROJECT_NAME, "version": "1.0.0", "status": "running"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
