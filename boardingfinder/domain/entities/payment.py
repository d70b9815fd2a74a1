"""Domain entity representing a rent payment submitted by a tenant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from boardingfinder.domain.errors import ValidationError

from ._validation import coerce_enum, require_text


class PaymentMethod(str, Enum):
    GCASH = "gcash"
    PAYMAYA = "paymaya"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    DECLINED = "declined"


@dataclass
class Payment:
    id: str | None
    reservation_id: str
    amount: Decimal
    method: PaymentMethod
    reference_number: str | None = None
    receipt_url: str | None = None
    notes: str | None = None
    status: PaymentStatus = PaymentStatus.PENDING
    verified_at: datetime | None = None
    verified_by: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        require_text(self.reservation_id, "reservation_id")
        self.amount = Decimal(str(self.amount))
        if self.amount <= 0:
            raise ValidationError("amount must be positive")
        self.method = coerce_enum(PaymentMethod, self.method, "payment method")
        self.status = coerce_enum(
            PaymentStatus, self.status or PaymentStatus.PENDING, "payment status"
        )


__all__ = ["Payment", "PaymentMethod", "PaymentStatus"]
