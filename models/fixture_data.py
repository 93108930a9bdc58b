from dataclasses import dataclass
from typing import Optional

from enums.category import Category


@dataclass(frozen=True)
class User:
    username: str
    password: str


@dataclass(frozen=True)
class Product:
    name: str
    category: Category
    # Read from the product page during a run when not pinned in fixtures
    price: Optional[float] = None


@dataclass(frozen=True)
class CheckoutData:
    name: str
    country: str
    city: str
    credit_card: str
    month: str
    year: str

    @classmethod
    def from_dict(cls, record: dict) -> "CheckoutData":
        return cls(
            name=record["name"],
            country=record["country"],
            city=record["city"],
            credit_card=record["creditCard"],
            month=str(record["month"]),
            year=str(record["year"]),
        )
