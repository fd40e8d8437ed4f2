import pytest

from oodnotes.domain.core.exceptions import ValidationError
from oodnotes.domain.patterns.singleton import AuditLog, OrderService, PaymentService


def test_services_share_explicitly_passed_log():
    # Arrange
    audit_log = AuditLog()
    orders = OrderService(audit_log)
    payments = PaymentService(audit_log)

    # Act
    order_id = orders.place_order("book")
    payments.charge(order_id, 500)

    # Assert
    assert audit_log.entries == [
        "[orders] placed order-1 for book",
        "[payments] charged 500 for order-1",
    ]
    assert orders.audit_log is payments.audit_log


def test_separate_logs_are_independent():
    first, second = AuditLog(), AuditLog()
    OrderService(first).place_order("pen")

    assert len(first) == 1
    assert len(second) == 0


def test_entries_are_a_copy():
    audit_log = AuditLog()
    audit_log.record("test", "hello")

    audit_log.entries.append("tampered")

    assert audit_log.entries == ["[test] hello"]


def test_charge_rejects_non_positive_amount():
    with pytest.raises(ValidationError):
        PaymentService(AuditLog()).charge("order-1", 0)


def test_clear():
    audit_log = AuditLog()
    audit_log.record("test", "hello")
    audit_log.clear()
    assert len(audit_log) == 0
