"""
Test suite for Lending Market

Contains:
- tests/unit/          : Unit tests for math, domain models, contracts and the quote evaluator
"""
