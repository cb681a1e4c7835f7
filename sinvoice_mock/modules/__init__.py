"""
SInvoice Mock Modules - Black Box Architecture

Each module is a self-contained black box with:
- Clear interface (public API)
- Hidden implementation details
- Single responsibility

The auth gate and the responder meet only at the HTTP boundary.
"""
