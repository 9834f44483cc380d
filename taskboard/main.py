from contextlib import asynccontextmanager

from fastapi import FastAPI

from taskboard.core import database
from taskboard.core.config import settings
from taskboard.core.exceptions import setup_exception_handlers
from taskboard.core.logging import get_logger, init_logging
from taskboard.core.middleware import setup_middleware
from taskboard.api.v1.api import api_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用程序生命周期管理"""
    init_logging()
    logger.info("Starting application...")

    try:
        if database.engine is None:
            database.init_db_connection()
        if settings.INIT_DB_ON_STARTUP:
            logger.info("Creating database tables...")
            database.create_tables()
        logger.info("Application startup completed")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {str(e)}", exc_info=True)
        raise

    finally:
        logger.info("Application shutdown completed")


def create_app() -> FastAPI:
    """创建FastAPI应用实例"""
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json" if not settings.is_production else None,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
        lifespan=lifespan
    )

    setup_middleware(app)
    setup_exception_handlers(app)

    @app.get("/health")
    def health_check():
        """健康检查端点"""
        return {
            "status": "healthy",
            "app_name": settings.APP_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT
        }

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
