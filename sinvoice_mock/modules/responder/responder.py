"""
Fixture builders for the SInvoice mock.

Every builder returns a fresh model per call. Random values come from
uuid4 and the wall clock; nothing here is meant to be reproducible
except through the explicit ``now_ms`` arguments used by tests.
"""

import time
import uuid
from typing import Optional

from ..api.models import HealthStatus, InvoiceResponse, InvoiceResult

SUPPLIER_TAX_CODE = "3703135239"
SERVICE_NAME = "Mock SInvoice API"

INVOICE_NO_PREFIX = "C25MNP"
CODE_OF_TAX_PREFIX = "M2-25-"
RESERVATION_CODE_LENGTH = 14
TAX_HASH_LENGTH = 6

FIXED_RESULT = InvoiceResult(
    supplier_tax_code=SUPPLIER_TAX_CODE,
    invoice_no="C25MNP56",
    transaction_id="176559280633249835",
    reservation_code="94L3DJLCHHYFVJC",
    code_of_tax="M2-25-BNFQQ-00000000059",
)

ERROR_CODE = "ERR001"
ERROR_BUSINESS_CODE = "INVALID_INVOICE"
ERROR_DESCRIPTION = "Invalid invoice data"
ERROR_MESSAGE = "Failed to create invoice: Invalid tax code"


def current_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def generate_invoice_no(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = current_millis()
    return f"{INVOICE_NO_PREFIX}{now_ms % 1000}"


def generate_transaction_id() -> str:
    """32 lowercase hex characters from a fresh random UUID."""
    return uuid.uuid4().hex


def generate_reservation_code() -> str:
    return uuid.uuid4().hex[:RESERVATION_CODE_LENGTH].upper()


def generate_code_of_tax(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = current_millis()
    tax_hash = uuid.uuid4().hex[:TAX_HASH_LENGTH].upper()
    return f"{CODE_OF_TAX_PREFIX}{tax_hash}-{now_ms % 100_000_000:08d}"


def build_fixed_response() -> InvoiceResponse:
    """Successful response with the constant invoice result."""
    return InvoiceResponse(result=FIXED_RESULT)


def build_random_response(now_ms: Optional[int] = None) -> InvoiceResponse:
    """
    Successful response with freshly generated invoice identifiers.

    The supplier tax code is always the fixed constant; the value a caller
    puts in the URL is not echoed back.
    """
    if now_ms is None:
        now_ms = current_millis()
    return InvoiceResponse(
        result=InvoiceResult(
            supplier_tax_code=SUPPLIER_TAX_CODE,
            invoice_no=generate_invoice_no(now_ms),
            transaction_id=generate_transaction_id(),
            reservation_code=generate_reservation_code(),
            code_of_tax=generate_code_of_tax(now_ms),
        )
    )


def build_error_response() -> InvoiceResponse:
    """Business-level failure payload returned with HTTP 400."""
    return InvoiceResponse(
        error_code=ERROR_CODE,
        code=ERROR_BUSINESS_CODE,
        description=ERROR_DESCRIPTION,
        message=ERROR_MESSAGE,
        result=None,
    )


def build_health_status() -> HealthStatus:
    return HealthStatus(status="UP", service=SERVICE_NAME)
