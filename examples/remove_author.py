import asyncio

import graphql
import sqlalchemy
import sqlalchemy.orm
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

import graphcompose as gc


class Base(sqlalchemy.orm.DeclarativeBase):
    pass


class AuthorRecord(Base):
    __tablename__ = "author"

    id = sqlalchemy.Column(sqlalchemy.Integer, primary_key=True)
    name = sqlalchemy.Column(sqlalchemy.Unicode, nullable=False)
    retired = sqlalchemy.Column(sqlalchemy.Boolean, nullable=False, default=False)


def create_schema(session_factory):
    type_storage = gc.TypeStorage()

    Author = gc.compose_with_sqlalchemy(AuthorRecord, type_storage=type_storage, name="Author")
    author_model = gc.SqlAlchemyModel(AuthorRecord, session_factory=session_factory)

    return graphql.GraphQLSchema(
        query=graphql.GraphQLObjectType("Query", {
            "version": graphql.GraphQLField(graphql.GraphQLString, resolve=lambda source, info: "1"),
        }),
        mutation=graphql.GraphQLObjectType("Mutation", {
            "authorRemoveById": gc.remove_by_id(author_model, Author, type_storage=type_storage).get_field_config(),
        }),
    )


async def main():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=sqlalchemy.pool.StaticPool)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    async with session_factory() as session:
        async with session.begin():
            session.add(AuthorRecord(id=1, name="PG Wodehouse"))

    result = await graphql.graphql(create_schema(session_factory), """
        mutation {
            authorRemoveById(_id: 1) {
                recordId
                record {
                    name
                }
            }
        }
    """)
    print(result)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
