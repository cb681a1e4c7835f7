"""Mock SInvoice API - a test double for the SInvoice invoice-issuing service."""

__version__ = "1.0.0"
