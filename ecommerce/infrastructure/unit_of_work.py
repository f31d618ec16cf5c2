# ecommerce/infrastructure/unit_of_work.py
from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession

from ecommerce.domain.interfaces import (
    AbstractCustomerRepository,
    AbstractOrderRepository,
    AbstractProductRepository,
)
from ecommerce.infrastructure.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)


class AbstractUnitOfWork(ABC):
    customers: AbstractCustomerRepository
    products: AbstractProductRepository
    orders: AbstractOrderRepository

    async def __aenter__(self):
        raise NotImplementedError

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        raise NotImplementedError

    @abstractmethod
    async def commit(self):
        raise NotImplementedError

    @abstractmethod
    async def rollback(self):
        raise NotImplementedError


class UnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.customers = SQLAlchemyCustomerRepository(self.session)
        self.products = SQLAlchemyProductRepository(self.session)
        self.orders = SQLAlchemyOrderRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
