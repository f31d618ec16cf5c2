# ecommerce/interactors/customer_interactor.py
from ecommerce.domain.entities import Customer
from ecommerce.domain.factories import CustomerFactory
from ecommerce.domain.value_objects import Address
from ecommerce.infrastructure.event_dispatcher import EventDispatcher
from ecommerce.infrastructure.unit_of_work import AbstractUnitOfWork


class CustomerInteractor:
    def __init__(self, uow: AbstractUnitOfWork, event_dispatcher: EventDispatcher):
        self.uow = uow
        self.event_dispatcher = event_dispatcher

    async def create_customer(self, name: str, address: Address | None = None) -> Customer:
        if address is None:
            customer = CustomerFactory.create(name)
        else:
            customer = CustomerFactory.create_with_address(name, address)
        async with self.uow as uow:
            await uow.customers.create(customer)
        self._publish(customer)
        return customer

    async def change_address(self, customer_id: str, address: Address) -> Customer:
        async with self.uow as uow:
            customer = await uow.customers.find(customer_id)
            customer.change_address(address)
            await uow.customers.update(customer)
        self._publish(customer)
        return customer

    def _publish(self, customer: Customer) -> None:
        # only after the transaction has been committed
        for event in customer.pull_events():
            self.event_dispatcher.notify(event)
