"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Invoice and its immutable Payment history
- Results: PaymentResult, the outcome of processing a payment
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
