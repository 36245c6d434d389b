"""
Domain Layer - Pure Business Logic

This module contains the core domain logic with zero external dependencies.
All business rules, entities, value objects, and domain services reside here.

Structure:
- entities/: Core business entities (Transaction, FeeConfiguration)
- value_objects/: Immutable value objects (Money, AccountNumber)
- services/: Domain services (FeeCalculator)
- exceptions.py: Domain-specific exceptions
"""
