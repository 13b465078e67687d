"""
Main FastAPI application.
This is the entry point for the backend server.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from luna.api.endpoints import chat, conversations, resources
from luna.core.config import settings
from luna.core.logging import setup_logging
from luna.services.completion_gateway import CompletionGateway
from luna.storage import (
    ConversationStore,
    InMemoryConversationStore,
    InMemoryResourceCatalog,
    ResourceCatalog,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    setup_logging()
    logger.info("Environment: %s", settings.ENVIRONMENT)
    gateway: CompletionGateway = app.state.completion_gateway
    if gateway.is_available:
        logger.info("Completion provider ready (model=%s)", settings.LLM_MODEL)
    else:
        logger.warning("No completion provider configured, chat will use fallback replies")

    yield

    logger.info("Shutting down")


def create_app(
    store: Optional[ConversationStore] = None,
    catalog: Optional[ResourceCatalog] = None,
    gateway: Optional[CompletionGateway] = None
) -> FastAPI:
    """
    Build the application with its store, catalog and gateway.

    Anything not passed in is constructed here, once per process.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Supportive AI companion chat backend",
        lifespan=lifespan
    )

    app.state.conversation_store = store if store is not None else InMemoryConversationStore()
    app.state.resource_catalog = catalog if catalog is not None else InMemoryResourceCatalog()
    app.state.completion_gateway = gateway if gateway is not None else CompletionGateway.from_settings(settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(chat.router)
    app.include_router(conversations.router)
    app.include_router(resources.router)

    @app.get("/")
    async def root():
        """Root endpoint - health check"""
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "status": "running"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "provider": "ready" if app.state.completion_gateway.is_available else "fallback"
        }

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Hide internal error details from clients."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
