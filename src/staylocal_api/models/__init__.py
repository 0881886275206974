"""API-specific request/response models.

Domain models (PriceBreakdown, Booking, PaymentResult, ...) live in
staylocal.models and are reused directly where they fit.

Modules:
- common: Health and error response models
- availability: Blocked dates and property availability responses
- payments: Payment status response
"""

__all__: list[str] = []
