# ecommerce/domain/services.py
from ecommerce.domain.entities import Customer, Order, OrderItem, Product
from ecommerce.domain.exceptions import DomainValidationError
from ecommerce.domain.factories import OrderFactory


class ProductService:
    @staticmethod
    def increase_price(products: list[Product], percentage: float) -> list[Product]:
        for product in products:
            product.change_price(product.price * percentage / 100 + product.price)
        return products


class OrderService:
    @staticmethod
    def total(orders: list[Order]) -> float:
        return sum(order.total() for order in orders)

    @staticmethod
    def place_order(customer: Customer, items: list[OrderItem]) -> Order:
        """Create an order for the customer and credit half its total as reward points."""
        if not items:
            raise DomainValidationError("Order must have at least one item")
        order = OrderFactory.create(customer.id, items)
        customer.add_reward_points(int(order.total() / 2))
        return order
