from enum import Enum


class Category(str, Enum):
    PHONES = "Phones"
    LAPTOPS = "Laptops"
    MONITORS = "Monitors"
