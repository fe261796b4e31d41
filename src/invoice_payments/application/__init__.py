"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: ProcessPaymentUseCase, the payment decision and its bookkeeping
- Ports: Abstract interfaces for the invoice store and locking

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
