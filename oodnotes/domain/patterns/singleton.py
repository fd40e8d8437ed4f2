"""Singleton, redesigned as an explicitly owned instance.

The classic version hides one process-wide logger behind a class-level
instance. Here AuditLog is an ordinary class: the composition root builds
one and hands it to every service that needs it, so sharing is visible in
constructor signatures and tests can build a fresh one each time.
"""
import logging
from typing import List

from oodnotes.domain.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AuditLog:
    """Append-only in-memory record of application activity."""

    def __init__(self, name: str = "audit"):
        self.name = name
        self._entries: List[str] = []

    @property
    def entries(self) -> List[str]:
        return list(self._entries)

    def record(self, source: str, message: str) -> str:
        entry = f"[{source}] {message}"
        self._entries.append(entry)
        logger.debug(f"{self.name}: {entry}")
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class OrderService:
    def __init__(self, audit_log: AuditLog):
        self.audit_log = audit_log
        self._orders: List[str] = []

    def place_order(self, item: str) -> str:
        order_id = f"order-{len(self._orders) + 1}"
        self._orders.append(order_id)
        self.audit_log.record("orders", f"placed {order_id} for {item}")
        return order_id


class PaymentService:
    def __init__(self, audit_log: AuditLog):
        self.audit_log = audit_log

    def charge(self, order_id: str, amount: int) -> None:
        if amount <= 0:
            raise ValidationError("Payment amount must be positive")
        self.audit_log.record("payments", f"charged {amount} for {order_id}")
