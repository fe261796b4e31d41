"""Invoice entity with derived payment bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import TYPE_CHECKING

from invoice_payments.domain.entities.payment import to_amount, to_reference
from invoice_payments.domain.exceptions import PaymentReferenceMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from invoice_payments.domain.entities.payment import Payment


@dataclass(frozen=True, slots=True)
class Invoice:
    """A bill with a total amount due and the payments applied to it so far.

    Invoice is immutable (frozen dataclass). apply_payment() returns a new
    Invoice; the repository's save() makes the change visible to others.

    The amount already paid is always derived from the payment history and
    never stored, so the two cannot drift apart.

    Payments summing past the amount due are not rejected here: the
    processing use case is the gatekeeper and rejects any further payment
    against such an invoice.
    """

    amount: Decimal
    reference: str
    payments: tuple[Payment, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "reference", to_reference(self.reference))
        object.__setattr__(self, "payments", tuple(self.payments))

        for payment in self.payments:
            self._check_reference(payment)

    @classmethod
    def create(
        cls,
        amount: Decimal | int | str,
        reference: str,
        payments: Iterable[Payment] = (),
    ) -> Invoice:
        """Build an invoice from loosely typed input (ints and numeric strings accepted)."""
        return cls(amount=to_amount(amount), reference=reference, payments=tuple(payments))

    @property
    def amount_paid(self) -> Decimal:
        """Sum of all applied payment amounts."""
        return sum((p.amount for p in self.payments), Decimal(0))

    @property
    def remaining(self) -> Decimal:
        """Amount still due; negative only if the history was overpaid."""
        return self.amount - self.amount_paid

    @property
    def has_payments(self) -> bool:
        return bool(self.payments)

    def apply_payment(self, payment: Payment) -> Invoice:
        """Append a payment to the history.

        Returns:
            New Invoice instance including the payment.

        Raises:
            PaymentReferenceMismatchError: If the payment belongs to another invoice.

        Note:
            This method does NOT check the amount against what is still due.
            ProcessPaymentUseCase decides whether a payment is accepted
            before calling it.
        """
        self._check_reference(payment)
        return replace(self, payments=(*self.payments, payment))

    def _check_reference(self, payment: Payment) -> None:
        if payment.reference != self.reference:
            raise PaymentReferenceMismatchError(
                f"Payment reference {payment.reference!r} does not match "
                f"invoice reference {self.reference!r}"
            )
