"""
API Models Module - Black Box Interface

Purpose: Define the JSON payloads the mock returns
Interface: InvoiceResponse, InvoiceResult, HealthStatus
Hidden: Wire aliases and serialization details
"""

from .models import HealthStatus, InvoiceResponse, InvoiceResult

__all__ = ["HealthStatus", "InvoiceResponse", "InvoiceResult"]
