# ecommerce/interactors/product_interactor.py
from ecommerce.domain.entities import Product
from ecommerce.domain.factories import ProductFactory
from ecommerce.domain.services import ProductService
from ecommerce.infrastructure.event_dispatcher import EventDispatcher
from ecommerce.infrastructure.unit_of_work import AbstractUnitOfWork


class ProductInteractor:
    def __init__(self, uow: AbstractUnitOfWork, event_dispatcher: EventDispatcher):
        self.uow = uow
        self.event_dispatcher = event_dispatcher

    async def create_product(self, name: str, price: float, description: str = "") -> Product:
        product = ProductFactory.create(name, price, description)
        async with self.uow as uow:
            await uow.products.create(product)
        for event in product.pull_events():
            self.event_dispatcher.notify(event)
        return product

    async def increase_prices(self, percentage: float) -> list[Product]:
        async with self.uow as uow:
            products = ProductService.increase_price(await uow.products.find_all(), percentage)
            for product in products:
                await uow.products.update(product)
        return products
