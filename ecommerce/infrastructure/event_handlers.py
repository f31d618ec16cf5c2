# ecommerce/infrastructure/event_handlers.py
import logging

from ecommerce.domain.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)


class LoggingEventHandler:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)


class SendEmailWhenProductIsCreatedHandler(LoggingEventHandler):
    def handle(self, event: ProductCreatedEvent) -> None:
        self.logger.info(f"Sending email: product {event.name} created at {event.price}")


class SendConsoleLog1WhenCustomerIsCreatedHandler(LoggingEventHandler):
    def handle(self, event: CustomerCreatedEvent) -> None:
        self.logger.info(f"This is the first console.log of event: {event.event_type}")


class SendConsoleLog2WhenCustomerIsCreatedHandler(LoggingEventHandler):
    def handle(self, event: CustomerCreatedEvent) -> None:
        self.logger.info(f"This is the second console.log of event: {event.event_type}")


class SendConsoleLogOnChangeCustomerAddressHandler(LoggingEventHandler):
    def handle(self, event: CustomerAddressChangedEvent | CustomerCreatedEvent) -> None:
        self.logger.info(
            f"Address of customer {event.id}, {event.name} changed to: {event.address}"
        )
