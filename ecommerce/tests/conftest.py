# ecommerce/tests/conftest.py

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ecommerce.config import AppConfig
from ecommerce.domain.entities import Customer, OrderItem, Product
from ecommerce.domain.value_objects import Address
from ecommerce.infrastructure.event_dispatcher import EventDispatcher
from ecommerce.infrastructure.unit_of_work import UnitOfWork


@pytest.fixture(scope="function")
def app_config():
    """
    Provide a test configuration backed by an in-memory SQLite database.
    """
    return AppConfig(
        PROJECT_NAME="TestEcommerce",
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture(scope="function")
async def engine(app_config):
    """Create a SQLAlchemy engine with the schema in place."""
    engine = create_async_engine(
        app_config.DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Reuse the same connection
        echo=False,
    )
    async with engine.begin() as conn:
        from ecommerce.infrastructure import models  # noqa: F401
        await conn.run_sync(models.Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session(engine):
    """Provide a SQLAlchemy session for testing."""
    session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False
    )
    session = session_factory()
    yield session
    await session.close()


@pytest.fixture(scope="function")
def uow(db_session):
    return UnitOfWork(db_session)


@pytest.fixture(scope="function")
def dispatcher():
    return EventDispatcher()


@pytest.fixture
def customer():
    customer = Customer("123", "Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    customer.pull_events()
    return customer


@pytest.fixture
def product():
    return Product("123", "Product 1", 10.0)


@pytest.fixture
def order_item(product):
    return OrderItem("1", product.name, product.price, product.id, 2)
