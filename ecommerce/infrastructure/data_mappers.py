# ecommerce/infrastructure/data_mappers.py

from typing import Protocol, TypeVar

from ecommerce.domain import entities
from ecommerce.domain.value_objects import Address
from ecommerce.infrastructure import models

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT")


class DataMapper(Protocol[EntityT, ModelT]):
    @staticmethod
    def to_domain(model: ModelT) -> EntityT:
        raise NotImplementedError

    @staticmethod
    def to_orm(entity: EntityT) -> ModelT:
        raise NotImplementedError


class CustomerMapper(DataMapper[entities.Customer, models.Customer]):
    @staticmethod
    def to_domain(model: models.Customer) -> entities.Customer:
        address = None
        if model.street is not None:
            address = Address(model.street, model.number, model.zipcode, model.city)
        return entities.Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    @staticmethod
    def to_orm(entity: entities.Customer) -> models.Customer:
        model = models.Customer(id=entity.id)
        CustomerMapper.copy_to(entity, model)
        return model

    @staticmethod
    def copy_to(entity: entities.Customer, model: models.Customer) -> None:
        address = entity.address
        model.name = entity.name
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zip if address else None
        model.city = address.city if address else None
        model.active = entity.active
        model.reward_points = entity.reward_points


class ProductMapper(DataMapper[entities.Product, models.Product]):
    @staticmethod
    def to_domain(model: models.Product) -> entities.Product:
        return entities.Product(id=model.id, name=model.name, price=model.price)

    @staticmethod
    def to_orm(entity: entities.Product) -> models.Product:
        return models.Product(id=entity.id, name=entity.name, price=entity.price)


class OrderItemMapper(DataMapper[entities.OrderItem, models.OrderItem]):
    @staticmethod
    def to_domain(model: models.OrderItem) -> entities.OrderItem:
        return entities.OrderItem(
            id=model.id,
            name=model.name,
            price=model.price,
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_orm(entity: entities.OrderItem) -> models.OrderItem:
        return models.OrderItem(
            id=entity.id,
            name=entity.name,
            price=entity.price,
            product_id=entity.product_id,
            quantity=entity.quantity,
        )


class OrderMapper(DataMapper[entities.Order, models.Order]):
    @staticmethod
    def to_domain(model: models.Order) -> entities.Order:
        return entities.Order(
            id=model.id,
            customer_id=model.customer_id,
            items=[OrderItemMapper.to_domain(item) for item in model.items],
        )

    @staticmethod
    def to_orm(entity: entities.Order) -> models.Order:
        return models.Order(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
            items=[OrderItemMapper.to_orm(item) for item in entity.items],
        )
