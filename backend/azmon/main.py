"""FastAPI application entry point."""
from contextlib import asynccontextmanager
import httpx
from fastapi import FastAPI
from azmon.config import get_settings
from azmon.api import api_router
from azmon.logging_config import setup_logging
from azmon.registry import DataSourceRegistry
from azmon.services.datasource_service import register_plugin

settings = get_settings()
logger = setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    registry = DataSourceRegistry()
    register_plugin(registry)
    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
        app.state.registry = registry
        app.state.dispatcher = registry.create(settings.datasource_info(), client, settings)
        logger.info("Serving datasource %r", settings.datasource_name)
        yield
    # Shutdown: the shared client is closed on leaving the block


app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="Routes Azure Monitor queries to their sub-service executors and merges the results",
    lifespan=lifespan,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("azmon.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
