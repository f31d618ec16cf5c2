# ecommerce/domain/interfaces.py
from abc import ABC, abstractmethod
from typing import List

from ecommerce.domain.entities import Customer, Order, Product


class AbstractCustomerRepository(ABC):
    @abstractmethod
    async def create(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def find(self, customer_id: str) -> Customer:
        pass

    @abstractmethod
    async def find_all(self) -> List[Customer]:
        pass


class AbstractProductRepository(ABC):
    @abstractmethod
    async def create(self, product: Product) -> None:
        pass

    @abstractmethod
    async def update(self, product: Product) -> None:
        pass

    @abstractmethod
    async def find(self, product_id: str) -> Product:
        pass

    @abstractmethod
    async def find_all(self) -> List[Product]:
        pass


class AbstractOrderRepository(ABC):
    @abstractmethod
    async def create(self, order: Order) -> None:
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        pass

    @abstractmethod
    async def find(self, order_id: str) -> Order:
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        pass
