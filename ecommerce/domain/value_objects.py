# ecommerce/domain/value_objects.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    zip: str
    city: str

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
