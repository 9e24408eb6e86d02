"""
Core domain models, mathematical primitives, and contracts.

This module contains the loan quote building blocks that are independent
of any market data source (amortization math, Offer/QuoteResult models,
JSON Schema contracts).
"""
