# ecommerce/infrastructure/repositories.py
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ecommerce.domain import entities
from ecommerce.domain.exceptions import NotFoundError
from ecommerce.domain.interfaces import (
    AbstractCustomerRepository,
    AbstractOrderRepository,
    AbstractProductRepository,
)
from ecommerce.infrastructure import models
from ecommerce.infrastructure.data_mappers import (
    CustomerMapper,
    OrderItemMapper,
    OrderMapper,
    ProductMapper,
)


class SQLAlchemyCustomerRepository(AbstractCustomerRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, customer_id: str) -> models.Customer:
        result = await self.session.execute(
            select(models.Customer).filter(models.Customer.id == customer_id)
        )
        db_customer = result.scalar_one_or_none()
        if not db_customer:
            raise NotFoundError("Customer not found")
        return db_customer

    async def create(self, customer: entities.Customer) -> None:
        self.session.add(CustomerMapper.to_orm(customer))
        await self.session.flush()

    async def update(self, customer: entities.Customer) -> None:
        db_customer = await self._get(customer.id)
        CustomerMapper.copy_to(customer, db_customer)
        await self.session.flush()

    async def find(self, customer_id: str) -> entities.Customer:
        return CustomerMapper.to_domain(await self._get(customer_id))

    async def find_all(self) -> List[entities.Customer]:
        result = await self.session.execute(select(models.Customer))
        return [CustomerMapper.to_domain(customer) for customer in result.scalars().all()]


class SQLAlchemyProductRepository(AbstractProductRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, product_id: str) -> models.Product:
        result = await self.session.execute(
            select(models.Product).filter(models.Product.id == product_id)
        )
        db_product = result.scalar_one_or_none()
        if not db_product:
            raise NotFoundError("Product not found")
        return db_product

    async def create(self, product: entities.Product) -> None:
        self.session.add(ProductMapper.to_orm(product))
        await self.session.flush()

    async def update(self, product: entities.Product) -> None:
        db_product = await self._get(product.id)
        db_product.name = product.name
        db_product.price = product.price
        await self.session.flush()

    async def find(self, product_id: str) -> entities.Product:
        return ProductMapper.to_domain(await self._get(product_id))

    async def find_all(self) -> List[entities.Product]:
        result = await self.session.execute(select(models.Product))
        return [ProductMapper.to_domain(product) for product in result.scalars().all()]


class SQLAlchemyOrderRepository(AbstractOrderRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get(self, order_id: str) -> models.Order:
        stmt = (
            select(models.Order)
            .options(selectinload(models.Order.items))
            .filter(models.Order.id == order_id)
        )
        result = await self.session.execute(stmt)
        db_order = result.scalar_one_or_none()
        if not db_order:
            raise NotFoundError("Order not found")
        return db_order

    async def create(self, order: entities.Order) -> None:
        self.session.add(OrderMapper.to_orm(order))
        await self.session.flush()

    async def update(self, order: entities.Order) -> None:
        db_order = await self._get(order.id)
        existing = {item.id: item for item in db_order.items}
        items = []
        for item in order.items:
            db_item = existing.get(item.id)
            if db_item is None:
                db_item = OrderItemMapper.to_orm(item)
            else:
                db_item.name = item.name
                db_item.price = item.price
                db_item.product_id = item.product_id
                db_item.quantity = item.quantity
            items.append(db_item)

        # items dropped from the aggregate are removed by delete-orphan
        db_order.items = items
        db_order.customer_id = order.customer_id
        db_order.total = order.total()
        await self.session.flush()

    async def find(self, order_id: str) -> entities.Order:
        return OrderMapper.to_domain(await self._get(order_id))

    async def find_all(self) -> List[entities.Order]:
        stmt = select(models.Order).options(selectinload(models.Order.items))
        result = await self.session.execute(stmt)
        return [OrderMapper.to_domain(order) for order in result.scalars().all()]
