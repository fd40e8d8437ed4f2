"""Single Responsibility Principle.

BloatedInvoice changes for three reasons: pricing rules, report layout and
storage. The compliant design gives each reason its own class.
"""
from typing import Dict, List, Optional, Tuple

from oodnotes.domain.base.value_object import ValueObject
from oodnotes.domain.core.exceptions import ValidationError


class LineItem(ValueObject):
    description: str
    unit_price: int
    quantity: int = 1

    @property
    def amount(self) -> int:
        return self.unit_price * self.quantity


# Violating

class BloatedInvoice:
    """Computes totals, renders itself and persists itself."""

    _storage: Dict[str, "BloatedInvoice"] = {}

    def __init__(self, number: str, items: List[Tuple[str, int, int]], tax_rate: float = 0.0):
        self.number = number
        self.items = items
        self.tax_rate = tax_rate

    def total(self) -> int:
        subtotal = sum(price * qty for _, price, qty in self.items)
        return round(subtotal * (1 + self.tax_rate))

    def render(self) -> str:
        lines = [f"Invoice {self.number}"]
        lines += [f"  {desc} x{qty}: {price * qty}" for desc, price, qty in self.items]
        lines.append(f"  Total: {self.total()}")
        return "\n".join(lines)

    def save(self) -> None:
        BloatedInvoice._storage[self.number] = self


# Compliant

class Invoice:
    def __init__(self, number: str, items: List[LineItem], tax_rate: float = 0.0):
        if tax_rate < 0:
            raise ValidationError("Tax rate cannot be negative")
        self.number = number
        self.items = list(items)
        self.tax_rate = tax_rate

    def subtotal(self) -> int:
        return sum(item.amount for item in self.items)

    def total(self) -> int:
        return round(self.subtotal() * (1 + self.tax_rate))


class InvoicePrinter:
    def render(self, invoice: Invoice) -> str:
        lines = [f"Invoice {invoice.number}"]
        lines += [f"  {item.description} x{item.quantity}: {item.amount}" for item in invoice.items]
        lines.append(f"  Total: {invoice.total()}")
        return "\n".join(lines)


class InMemoryInvoiceRepository:
    def __init__(self):
        self._invoices: Dict[str, Invoice] = {}

    def save(self, invoice: Invoice) -> None:
        self._invoices[invoice.number] = invoice

    def find(self, number: str) -> Optional[Invoice]:
        return self._invoices.get(number)
