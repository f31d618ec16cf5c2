# ecommerce/domain/entities.py
from dataclasses import dataclass, field

from ecommerce.domain.events import CustomerAddressChangedEvent, Event
from ecommerce.domain.exceptions import DomainValidationError
from ecommerce.domain.value_objects import Address


@dataclass
class Entity:
    id: str
    _events: list[Event] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def record_event(self, event: Event) -> None:
        self._events.append(event)

    def pull_events(self) -> list[Event]:
        """Return the events recorded since the last pull and forget them."""
        events, self._events = self._events, []
        return events


@dataclass
class Customer(Entity):
    name: str = ""
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.name:
            raise DomainValidationError("Name is required")

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate()

    def change_address(self, address: Address) -> None:
        self.address = address
        self.record_event(
            CustomerAddressChangedEvent(id=self.id, name=self.name, address=str(address))
        )

    def activate(self) -> None:
        if self.address is None:
            raise DomainValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def add_reward_points(self, points: int) -> None:
        self.reward_points += points


@dataclass
class Product(Entity):
    name: str = ""
    price: float = 0.0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.name:
            raise DomainValidationError("Name is required")
        if self.price <= 0:
            raise DomainValidationError("Price must be greater than zero")

    def change_name(self, name: str) -> None:
        self.name = name
        self.validate()

    def change_price(self, price: float) -> None:
        self.price = price
        self.validate()


@dataclass
class OrderItem:
    id: str
    name: str
    price: float
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.name:
            raise DomainValidationError("Name is required")
        if not self.product_id:
            raise DomainValidationError("ProductId is required")
        if self.price <= 0:
            raise DomainValidationError("Price must be greater than zero")
        if self.quantity <= 0:
            raise DomainValidationError("Quantity must be greater than 0")

    def total(self) -> float:
        return self.price * self.quantity


@dataclass
class Order(Entity):
    customer_id: str = ""
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.customer_id:
            raise DomainValidationError("CustomerId is required")
        if not self.items:
            raise DomainValidationError("Items are required")

    def add_item(self, item: OrderItem) -> None:
        self.items.append(item)

    def total(self) -> float:
        return sum(item.total() for item in self.items)
