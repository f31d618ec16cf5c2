# ecommerce/interactors/order_interactor.py
import uuid

from ecommerce.domain.entities import Order, OrderItem
from ecommerce.domain.services import OrderService
from ecommerce.infrastructure.unit_of_work import AbstractUnitOfWork


class OrderInteractor:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    async def place_order(self, customer_id: str, quantities: dict[str, int]) -> Order:
        """Order the given quantity of each product id for the customer."""
        async with self.uow as uow:
            customer = await uow.customers.find(customer_id)
            items = []
            for product_id, quantity in quantities.items():
                product = await uow.products.find(product_id)
                items.append(
                    OrderItem(
                        id=str(uuid.uuid4()),
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=quantity,
                    )
                )
            order = OrderService.place_order(customer, items)
            await uow.orders.create(order)
            await uow.customers.update(customer)
        return order

    async def get_order(self, order_id: str) -> Order:
        async with self.uow as uow:
            return await uow.orders.find(order_id)
