#!/usr/bin/env python3
"""
SInvoice Mock - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the authentication stack and the route table
3. Runs the API server

All behaviour lives in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sinvoice_mock import __version__
from sinvoice_mock.config import ConfigProvider, get_config_provider
from sinvoice_mock.logging_config import configure_logging, get_logging_config
from sinvoice_mock.modules.auth import AuthFactory
from sinvoice_mock.modules.middleware import create_basic_auth_middleware
from sinvoice_mock.modules.responder import create_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.

    Nothing is opened or closed: the service holds no external resources.
    """
    api_config = app.state.api_config
    logger.info(f"Mock SInvoice API serving under '{api_config.api_root or '/'}'")

    yield

    logger.info("Mock SInvoice API shutdown complete")


async def validation_error_handler(request: Request, exc: ValueError):
    """Handle validation errors."""
    logger.error(f"Validation error: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app(config_provider: Optional[ConfigProvider] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The credential store is seeded here, once, and shared read-only by
    every request served by the returned app.

    Args:
        config_provider: Configuration source; defaults to the environment

    Returns:
        Configured FastAPI application
    """
    if config_provider is None:
        config_provider = get_config_provider()

    api_config = config_provider.get_api_config()
    auth_config = config_provider.get_auth_config()

    app = FastAPI(
        title="Mock SInvoice API",
        description="Test double for the SInvoice invoice-issuing API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.api_config = api_config

    # Build authentication service via factory (dependency injection)
    auth_service = AuthFactory.build(config_provider)
    app.state.auth_service = auth_service

    auth_middleware = create_basic_auth_middleware(
        auth_service,
        health_path=api_config.health_path,
        realm=auth_config.realm,
    )

    @app.middleware("http")
    async def basic_auth(request: Request, call_next):
        return await auth_middleware(request, call_next)

    app.include_router(create_router(api_config.api_root))
    app.add_exception_handler(ValueError, validation_error_handler)

    return app


def run() -> None:
    """Console entry point: configure logging and serve with uvicorn."""
    api_config = get_config_provider().get_api_config()
    configure_logging(api_config.log_level, api_config.health_path)

    uvicorn.run(
        "sinvoice_mock.main:create_app",
        factory=True,
        host=api_config.host,
        port=api_config.port,
        log_level=api_config.log_level.lower(),
        reload=api_config.debug,
        log_config=get_logging_config(api_config.log_level, api_config.health_path),
    )


if __name__ == "__main__":
    run()
