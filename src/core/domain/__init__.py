"""
Domain models and value objects.

Contains the lending market entities: Offer and QuoteResult.
"""

from src.core.domain.offer import Offer
from src.core.domain.quote import QuoteResult

__all__ = [
    "Offer",
    "QuoteResult",
]
