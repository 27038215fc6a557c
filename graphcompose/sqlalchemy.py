import logging

import sqlalchemy

from .errors import ComposeError


_logger = logging.getLogger(__name__)


class SqlAlchemyModel(object):
    """
    Record model backed by a SQLAlchemy declarative class.

    ``session_factory`` is called with no arguments to open an
    ``AsyncSession``, typically an ``async_sessionmaker``. Every executed
    query uses its own session and transaction.
    """

    def __init__(self, model, *, session_factory):
        primary_key = sqlalchemy.inspect(model).primary_key
        if len(primary_key) != 1:
            raise ComposeError("{} must have exactly one primary key column but has {}".format(
                model.__name__,
                len(primary_key),
            ))

        self.model = model
        self.primary_key = primary_key[0]
        self.session_factory = session_factory

    @property
    def name(self):
        return self.model.__name__

    def delete_by_id_query(self, record_id):
        return RemoveQuery(
            model=self,
            where_clauses=(self.primary_key == record_id, ),
        )

    def __repr__(self):
        return "SqlAlchemyModel(model={})".format(self.name)


class RemoveQuery(object):
    """
    Unexecuted query that removes at most one record.

    Queries are immutable: ``where`` returns a new query, leaving the
    original untouched. Nothing is sent to the database until ``execute``
    is awaited.
    """

    def __init__(self, model, where_clauses):
        self.model = model
        self.where_clauses = where_clauses

    def where(self, *where):
        return RemoveQuery(
            model=self.model,
            where_clauses=self.where_clauses + where,
        )

    def to_delete(self):
        # the subquery limits removal to one row; correlate(None) keeps its own FROM
        matching_id = sqlalchemy.select(self.model.primary_key) \
            .where(*self.where_clauses) \
            .limit(1) \
            .correlate(None)

        return sqlalchemy.delete(self.model.model) \
            .where(self.model.primary_key.in_(matching_id)) \
            .returning(self.model.model)

    async def execute(self):
        statement = self.to_delete()

        async with self.model.session_factory() as session:
            async with session.begin():
                _logger.debug("removing %s matching %s", self.model.name, sqlalchemy.and_(*self.where_clauses))
                result = await session.execute(statement, execution_options={"synchronize_session": False})
                record = result.scalars().first()
                if record is not None:
                    session.expunge(record)

        return record
