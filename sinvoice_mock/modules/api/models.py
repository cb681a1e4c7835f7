"""
SInvoice mock wire models.

These models define the JSON bodies returned by the mock. Field names on
the wire follow the SInvoice API (camelCase); every field is always
serialized, with null for unset values.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InvoiceResult(BaseModel):
    """Details of a (simulated) successfully issued invoice."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    supplier_tax_code: str = Field(..., alias="supplierTaxCode")
    invoice_no: str = Field(..., alias="invoiceNo")
    transaction_id: str = Field(..., alias="transactionID")
    reservation_code: str = Field(..., alias="reservationCode")
    code_of_tax: str = Field(..., alias="codeOfTax")


class InvoiceResponse(BaseModel):
    """Envelope returned by every createInvoice route."""

    model_config = ConfigDict(populate_by_name=True)

    error_code: Optional[str] = Field(None, alias="errorCode")
    code: Optional[str] = Field(None, description="Business error code")
    description: Optional[str] = Field(None, description="Short error description")
    message: Optional[str] = Field(None, description="Human readable error message")
    result: Optional[InvoiceResult] = Field(None, description="Issued invoice, null on error")

    def to_wire(self) -> dict:
        """Serialize with SInvoice field names, keeping null fields."""
        return self.model_dump(by_alias=True)


class HealthStatus(BaseModel):
    """Health check response."""

    status: str
    service: str
