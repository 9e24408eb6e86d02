"""
Contract Validation Module

Модуль для валидации JSON контрактов Lending Market.
"""

from .validators import (
    ContractValidator,
    OfferValidator,
    QuoteResultValidator,
    SchemaLoader,
    get_schema_loader,
    validate_offer,
    validate_quote_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OfferValidator",
    "QuoteResultValidator",
    # Functions
    "get_schema_loader",
    "validate_offer",
    "validate_quote_result",
]
