from dataclasses import dataclass


@dataclass(frozen=True)
class CartItem:
    """One cart row as scraped from the table. Recomputed on every read."""
    name: str
    price: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "name", self.name.strip())


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: str
    amount: float
