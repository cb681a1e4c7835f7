"""
Mock Responder Module - Black Box Interface

Purpose: Serve canned and semi-random SInvoice payloads
Interface: ROUTE_TABLE, create_router(), build_*_response()
Hidden: Value generation formats, fixture constants
"""

from .responder import (
    FIXED_RESULT,
    SERVICE_NAME,
    SUPPLIER_TAX_CODE,
    build_error_response,
    build_fixed_response,
    build_health_status,
    build_random_response,
    generate_code_of_tax,
    generate_invoice_no,
    generate_reservation_code,
    generate_transaction_id,
)
from .routes import ROUTE_TABLE, Route, create_router

__all__ = [
    "FIXED_RESULT",
    "ROUTE_TABLE",
    "Route",
    "SERVICE_NAME",
    "SUPPLIER_TAX_CODE",
    "build_error_response",
    "build_fixed_response",
    "build_health_status",
    "build_random_response",
    "create_router",
    "generate_code_of_tax",
    "generate_invoice_no",
    "generate_reservation_code",
    "generate_transaction_id",
]
