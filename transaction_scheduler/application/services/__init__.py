"""Application services."""
from transaction_scheduler.application.services.pricing_service import PricingService

__all__ = ["PricingService"]
