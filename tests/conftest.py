import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from graphcompose import compose_with_sqlalchemy, SqlAlchemyModel, TypeStorage

from .models import Base, UserRow


@pytest.fixture
def engine(tmp_path):
    return create_async_engine(
        "sqlite+aiosqlite:///{}".format(tmp_path / "test.db"),
        poolclass=NullPool,
    )


@pytest_asyncio.fixture
async def database(engine):
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    return engine


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def type_storage():
    return TypeStorage()


@pytest.fixture
def user_model(session_factory):
    return SqlAlchemyModel(UserRow, session_factory=session_factory)


@pytest.fixture
def user_type_composer(type_storage):
    return compose_with_sqlalchemy(UserRow, type_storage=type_storage, name="User")


@pytest_asyncio.fixture
async def user(database, session_factory):
    user = UserRow(
        name="userName1",
        skills="js, ruby, php, python",
        gender="male",
        relocation=True,
    )

    async with session_factory() as session:
        async with session.begin():
            session.add(user)

    return user
