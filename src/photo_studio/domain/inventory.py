"""Domain models for studio inventory."""

from dataclasses import dataclass

UNIT = "pcs"


@dataclass
class InventoryItem:
    """Consumable or equipment tracked by count."""

    name: str
    quantity: int

    def add_quantity(self, amount: int) -> None:
        """Increase the stock; non-positive amounts are ignored."""
        if amount > 0:
            self.quantity += amount

    def label(self) -> str:
        return f"{self.name}: {self.quantity} {UNIT}"
