# ecommerce/main.py
import asyncio
import logging
import sys

from ecommerce.config import AppConfig
from ecommerce.domain.events import (
    CustomerAddressChangedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from ecommerce.domain.value_objects import Address
from ecommerce.infrastructure.database import create_database
from ecommerce.infrastructure.event_dispatcher import EventDispatcher
from ecommerce.infrastructure.event_handlers import (
    SendConsoleLog1WhenCustomerIsCreatedHandler,
    SendConsoleLog2WhenCustomerIsCreatedHandler,
    SendConsoleLogOnChangeCustomerAddressHandler,
    SendEmailWhenProductIsCreatedHandler,
)
from ecommerce.infrastructure.unit_of_work import UnitOfWork
from ecommerce.interactors.customer_interactor import CustomerInteractor
from ecommerce.interactors.order_interactor import OrderInteractor
from ecommerce.interactors.product_interactor import ProductInteractor


class Application:
    def __init__(self, config: AppConfig):
        self.config = config
        self.logger = self.setup_logger()
        self.database = create_database(config, self.logger.getChild("database"))
        self.event_dispatcher = EventDispatcher()

        # Register event handlers
        events_logger = self.logger.getChild("events")
        self.event_dispatcher.register(
            ProductCreatedEvent, SendEmailWhenProductIsCreatedHandler(events_logger)
        )
        self.event_dispatcher.register(
            CustomerCreatedEvent, SendConsoleLog1WhenCustomerIsCreatedHandler(events_logger)
        )
        self.event_dispatcher.register(
            CustomerCreatedEvent, SendConsoleLog2WhenCustomerIsCreatedHandler(events_logger)
        )
        self.event_dispatcher.register(
            CustomerAddressChangedEvent,
            SendConsoleLogOnChangeCustomerAddressHandler(events_logger),
        )

    def setup_logger(self):
        logger = logging.getLogger(self.config.PROJECT_NAME)
        logger.setLevel(self.config.LOG_LEVEL)

        if not logger.handlers:
            c_handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            c_handler.setFormatter(formatter)
            logger.addHandler(c_handler)

        return logger

    async def startup(self) -> None:
        await self.database.connect()
        self.logger.info("Database connected")

    async def shutdown(self) -> None:
        await self.database.disconnect()
        self.logger.info("Database disconnected")

    def customer_interactor(self, uow: UnitOfWork) -> CustomerInteractor:
        return CustomerInteractor(uow, self.event_dispatcher)

    def product_interactor(self, uow: UnitOfWork) -> ProductInteractor:
        return ProductInteractor(uow, self.event_dispatcher)

    def order_interactor(self, uow: UnitOfWork) -> OrderInteractor:
        return OrderInteractor(uow)


async def run(application: Application) -> None:
    """Walk a customer through signup, an address change and a first order."""
    await application.startup()
    try:
        async with application.database.session() as session:
            uow = UnitOfWork(session)
            customers = application.customer_interactor(uow)
            products = application.product_interactor(uow)

            customer = await customers.create_customer(
                "Customer 1", Address("Street", 1, "12345678", "City")
            )
            await customers.change_address(
                customer.id, Address("Street 2", 2, "87654321", "City 2")
            )
            product = await products.create_product("Product 1", 10.0, "Product 1 description")

            order = await application.order_interactor(uow).place_order(
                customer.id, {product.id: 2}
            )
            application.logger.info(f"Order {order.id} placed, total {order.total()}")
    finally:
        await application.shutdown()


def create() -> Application:
    config = AppConfig()
    application = Application(config)
    application.logger.info("Application created and configured")
    return application


if __name__ == "__main__":
    asyncio.run(run(create()))
