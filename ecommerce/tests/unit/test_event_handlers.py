# ecommerce/tests/unit/test_event_handlers.py
import logging

import pytest

from ecommerce.domain.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    EventHandler,
    ProductCreatedEvent,
)
from ecommerce.infrastructure.event_handlers import (
    SendConsoleLog1WhenCustomerIsCreatedHandler,
    SendConsoleLog2WhenCustomerIsCreatedHandler,
    SendConsoleLogOnChangeCustomerAddressHandler,
    SendEmailWhenProductIsCreatedHandler,
)


@pytest.fixture
def logger():
    return logging.getLogger("test.events")


def test_handlers_satisfy_protocol():
    assert isinstance(SendEmailWhenProductIsCreatedHandler(), EventHandler)
    assert isinstance(SendConsoleLogOnChangeCustomerAddressHandler(), EventHandler)


def test_send_email_when_product_is_created(logger, caplog):
    event = ProductCreatedEvent(name="Product 1", price=10.0)
    with caplog.at_level(logging.INFO, logger="test.events"):
        SendEmailWhenProductIsCreatedHandler(logger).handle(event)
    assert "Product 1" in caplog.text


def test_customer_created_handlers(logger, caplog):
    event = CustomerCreatedEvent(id="1", name="Customer 1")
    with caplog.at_level(logging.INFO, logger="test.events"):
        SendConsoleLog1WhenCustomerIsCreatedHandler(logger).handle(event)
        SendConsoleLog2WhenCustomerIsCreatedHandler(logger).handle(event)
    assert "first console.log of event: CustomerCreatedEvent" in caplog.text
    assert "second console.log of event: CustomerCreatedEvent" in caplog.text


def test_customer_address_changed_handler(logger, caplog):
    event = CustomerAddressChangedEvent(id="1", name="Customer 1", address="Street 2, 2, 87654321 City 2")
    with caplog.at_level(logging.INFO, logger="test.events"):
        SendConsoleLogOnChangeCustomerAddressHandler(logger).handle(event)
    assert "Address of customer 1, Customer 1 changed to: Street 2, 2, 87654321 City 2" in caplog.text
