# ecommerce/domain/events.py
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Registry key the dispatcher routes this event by."""
        return type(self).__name__

    @property
    def event_data(self) -> dict[str, Any]:
        return self.model_dump(exclude={"occurred_at"})


@runtime_checkable
class EventHandler(Protocol):
    def handle(self, event: Event) -> None: ...


class ProductCreatedEvent(Event):
    id: str | None = None
    name: str
    description: str = ""
    price: float


class CustomerCreatedEvent(Event):
    id: str
    name: str
    address: str | None = None


class CustomerAddressChangedEvent(Event):
    id: str
    name: str
    address: str
