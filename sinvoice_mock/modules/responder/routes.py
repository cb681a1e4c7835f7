"""
Route table for the SInvoice mock.

Routes are registered on the router in table order and the router matches
in registration order, so literal paths must come before the
``{supplier_tax_code}`` wildcard.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..api.models import HealthStatus, InvoiceResponse
from .responder import (
    build_error_response,
    build_fixed_response,
    build_health_status,
    build_random_response,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """One entry of the route table."""

    method: str
    path: str
    endpoint: Callable[..., Any]
    name: str
    response_model: Optional[Type[BaseModel]] = None
    status_code: int = 200
    responses: Dict[int, Dict[str, Any]] = field(default_factory=dict)


async def health() -> HealthStatus:
    """Health check; reachable without credentials."""
    return build_health_status()


async def create_invoice_fixed(payload: Any = Body(None)) -> InvoiceResponse:
    """Return the constant invoice. The request body is ignored."""
    logger.info("Mock SInvoice createInvoice (fixed) endpoint called")
    return build_fixed_response()


async def create_invoice_error(payload: Any = Body(None)) -> JSONResponse:
    """Return the simulated business error with HTTP 400."""
    logger.warning("Mock SInvoice createInvoice (error) endpoint called")
    return JSONResponse(status_code=400, content=build_error_response().to_wire())


async def create_invoice_random(supplier_tax_code: str, payload: Any = Body(None)) -> InvoiceResponse:
    """Return an invoice with freshly generated identifiers."""
    logger.info(
        f"Mock SInvoice createInvoice (random) endpoint called for supplierTaxCode={supplier_tax_code}"
    )
    return build_random_response()


ROUTE_TABLE: List[Route] = [
    Route("GET", "health", health, "health", response_model=HealthStatus),
    Route(
        "POST",
        "createInvoice/fixed",
        create_invoice_fixed,
        "create_invoice_fixed",
        response_model=InvoiceResponse,
    ),
    Route(
        "POST",
        "createInvoice/error",
        create_invoice_error,
        "create_invoice_error",
        status_code=400,
        responses={400: {"model": InvoiceResponse, "description": "Simulated business error"}},
    ),
    Route(
        "POST",
        "createInvoice/{supplier_tax_code}",
        create_invoice_random,
        "create_invoice_random",
        response_model=InvoiceResponse,
    ),
]


def create_router(api_root: str, routes: Sequence[Route] = ROUTE_TABLE) -> APIRouter:
    """
    Build a router serving the route table under ``api_root``.

    Args:
        api_root: Normalized root path ("" or "/segment[/segment...]")
        routes: Ordered route table

    Returns:
        APIRouter with one route per table entry, in table order
    """
    router = APIRouter(prefix=api_root, tags=["sinvoice"])
    for route in routes:
        router.add_api_route(
            f"/{route.path}",
            route.endpoint,
            methods=[route.method],
            name=route.name,
            response_model=route.response_model,
            status_code=route.status_code,
            responses=route.responses or None,
        )
    return router
