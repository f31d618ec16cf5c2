# ecommerce/tests/integration/test_customer_repository.py
import pytest
from sqlalchemy import select

from ecommerce.domain.entities import Customer
from ecommerce.domain.exceptions import NotFoundError
from ecommerce.domain.value_objects import Address
from ecommerce.infrastructure import models
from ecommerce.infrastructure.repositories import SQLAlchemyCustomerRepository


@pytest.fixture
def repository(db_session):
    return SQLAlchemyCustomerRepository(db_session)


@pytest.mark.asyncio
async def test_create_customer(repository, db_session, customer):
    await repository.create(customer)

    row = await db_session.scalar(select(models.Customer).where(models.Customer.id == "123"))
    assert row.name == "Customer 1"
    assert (row.street, row.number, row.zipcode, row.city) == ("Street 1", 1, "Zipcode 1", "City 1")
    assert row.active is False
    assert row.reward_points == 0


@pytest.mark.asyncio
async def test_update_customer(repository, customer):
    await repository.create(customer)

    customer.change_name("Customer 2")
    customer.activate()
    customer.add_reward_points(7)
    await repository.update(customer)

    found = await repository.find("123")
    assert found == customer
    assert found.active is True
    assert found.reward_points == 7


@pytest.mark.asyncio
async def test_find_customer_without_address(repository):
    customer = Customer("456", "No Address")
    await repository.create(customer)

    found = await repository.find("456")

    assert found.address is None
    assert found == customer


@pytest.mark.asyncio
async def test_find_missing_customer(repository):
    with pytest.raises(NotFoundError, match="Customer not found"):
        await repository.find("missing")


@pytest.mark.asyncio
async def test_update_missing_customer(repository):
    with pytest.raises(NotFoundError):
        await repository.update(Customer("missing", "Ghost"))


@pytest.mark.asyncio
async def test_find_all_customers(repository, customer):
    customer2 = Customer("456", "Customer 2")
    customer2.change_address(Address("Street 2", 2, "Zipcode 2", "City 2"))
    await repository.create(customer)
    await repository.create(customer2)

    customers = await repository.find_all()

    assert len(customers) == 2
    assert customer in customers
    assert customer2 in customers
