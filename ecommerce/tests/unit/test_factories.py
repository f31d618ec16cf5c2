# ecommerce/tests/unit/test_factories.py
from ecommerce.domain.entities import OrderItem
from ecommerce.domain.events import CustomerCreatedEvent, ProductCreatedEvent
from ecommerce.domain.factories import CustomerFactory, OrderFactory, ProductFactory
from ecommerce.domain.value_objects import Address


def test_create_customer():
    customer = CustomerFactory.create("John")

    assert customer.id
    assert customer.name == "John"
    assert customer.address is None
    events = customer.pull_events()
    assert [type(event) for event in events] == [CustomerCreatedEvent]
    assert events[0].id == customer.id


def test_create_customer_with_address():
    address = Address("Street", 1, "13330-250", "São Paulo")
    customer = CustomerFactory.create_with_address("John", address)

    assert customer.address == address
    assert customer.pull_events()[0].address == str(address)


def test_create_product():
    product = ProductFactory.create("Product A", 1, "Some description")

    assert product.id
    assert product.name == "Product A"
    assert product.price == 1
    (event,) = product.pull_events()
    assert isinstance(event, ProductCreatedEvent)
    assert event.description == "Some description"


def test_create_order():
    item = OrderItem("i1", "Product 1", 100, "p1", 1)
    order = OrderFactory.create("c1", [item])

    assert order.id
    assert order.customer_id == "c1"
    assert order.items == [item]


def test_factories_generate_distinct_ids():
    assert CustomerFactory.create("A").id != CustomerFactory.create("A").id
