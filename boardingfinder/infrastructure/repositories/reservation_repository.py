"""Persistence helpers for reservations and payments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from boardingfinder.domain.entities import (
    Payment,
    PaymentStatus,
    Reservation,
    ReservationStatus,
)
from boardingfinder.infrastructure.data_service import DataService, Row, descending, eq, is_in


class ReservationRepository:
    TABLE = "reservations"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def get(self, reservation_id: str) -> Reservation | None:
        rows = await self.data.query(self.TABLE, eq("id", reservation_id), limit=1)
        return self._to_entity(rows[0]) if rows else None

    async def list_for_tenant(self, tenant_id: str) -> Sequence[Reservation]:
        rows = await self.data.query(
            self.TABLE, eq("tenant_id", tenant_id), order=descending("created_at")
        )
        return [self._to_entity(row) for row in rows]

    async def list_for_properties(self, property_ids: Iterable[str]) -> Sequence[Reservation]:
        ids = list(property_ids)
        if not ids:
            return []
        rows = await self.data.query(
            self.TABLE, is_in("property_id", ids), order=descending("created_at")
        )
        return [self._to_entity(row) for row in rows]

    async def create(self, reservation: Reservation) -> Reservation:
        row = await self.data.insert(
            self.TABLE,
            {
                "property_id": reservation.property_id,
                "tenant_id": reservation.tenant_id,
                "check_in": reservation.check_in,
                "check_out": reservation.check_out,
                "notes": reservation.notes,
                "status": reservation.status.value,
            },
        )
        return self._to_entity(row)

    async def update_status(self, reservation_id: str, status: ReservationStatus) -> None:
        await self.data.update(self.TABLE, eq("id", reservation_id), {"status": status.value})

    @staticmethod
    def _to_entity(row: Row) -> Reservation:
        return Reservation(
            id=row["id"],
            property_id=row["property_id"],
            tenant_id=row["tenant_id"],
            check_in=row["check_in"],
            check_out=row.get("check_out"),
            notes=row.get("notes"),
            status=row.get("status"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


class PaymentRepository:
    TABLE = "payments"

    def __init__(self, data: DataService) -> None:
        self.data = data

    async def get(self, payment_id: str) -> Payment | None:
        rows = await self.data.query(self.TABLE, eq("id", payment_id), limit=1)
        return self._to_entity(rows[0]) if rows else None

    async def list_for_reservations(self, reservation_ids: Iterable[str]) -> Sequence[Payment]:
        ids = list(reservation_ids)
        if not ids:
            return []
        rows = await self.data.query(
            self.TABLE, is_in("reservation_id", ids), order=descending("created_at")
        )
        return [self._to_entity(row) for row in rows]

    async def create(self, payment: Payment) -> Payment:
        row = await self.data.insert(
            self.TABLE,
            {
                "reservation_id": payment.reservation_id,
                "amount": payment.amount,
                "method": payment.method.value,
                "reference_number": payment.reference_number,
                "receipt_url": payment.receipt_url,
                "notes": payment.notes,
                "status": payment.status.value,
            },
        )
        return self._to_entity(row)

    async def record_review(
        self,
        payment_id: str,
        *,
        status: PaymentStatus,
        verified_by: str,
        verified_at: datetime | None,
    ) -> None:
        await self.data.update(
            self.TABLE,
            eq("id", payment_id),
            {"status": status.value, "verified_by": verified_by, "verified_at": verified_at},
        )

    @staticmethod
    def _to_entity(row: Row) -> Payment:
        return Payment(
            id=row["id"],
            reservation_id=row["reservation_id"],
            amount=row["amount"],
            method=row["method"],
            reference_number=row.get("reference_number"),
            receipt_url=row.get("receipt_url"),
            notes=row.get("notes"),
            status=row.get("status"),
            verified_at=row.get("verified_at"),
            verified_by=row.get("verified_by"),
            created_at=row.get("created_at"),
        )


__all__ = ["PaymentRepository", "ReservationRepository"]
