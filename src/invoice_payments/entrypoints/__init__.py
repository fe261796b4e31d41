"""Entrypoints layer - Delivery mechanisms.

Entrypoints build the use cases from configuration and hand them to
callers. There is no API or CLI; callers use the composition root directly.
"""

from invoice_payments.entrypoints.container import build_process_payment_use_case

__all__ = ["build_process_payment_use_case"]
