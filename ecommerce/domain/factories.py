# ecommerce/domain/factories.py
import uuid

from ecommerce.domain.entities import Customer, Order, OrderItem, Product
from ecommerce.domain.events import CustomerCreatedEvent, ProductCreatedEvent
from ecommerce.domain.value_objects import Address


def _new_id() -> str:
    return str(uuid.uuid4())


class CustomerFactory:
    @staticmethod
    def create(name: str) -> Customer:
        customer = Customer(id=_new_id(), name=name)
        customer.record_event(CustomerCreatedEvent(id=customer.id, name=customer.name))
        return customer

    @staticmethod
    def create_with_address(name: str, address: Address) -> Customer:
        customer = Customer(id=_new_id(), name=name, address=address)
        customer.record_event(
            CustomerCreatedEvent(id=customer.id, name=customer.name, address=str(address))
        )
        return customer


class ProductFactory:
    @staticmethod
    def create(name: str, price: float, description: str = "") -> Product:
        product = Product(id=_new_id(), name=name, price=price)
        product.record_event(
            ProductCreatedEvent(
                id=product.id, name=product.name, description=description, price=product.price
            )
        )
        return product


class OrderFactory:
    @staticmethod
    def create(customer_id: str, items: list[OrderItem]) -> Order:
        return Order(id=_new_id(), customer_id=customer_id, items=list(items))
