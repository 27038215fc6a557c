import inspect
import logging

import graphql

from ..errors import ArgumentValidationError
from ..iterables import is_empty_value
from ..naming import payload_type_name
from ..resolver import Arg, Resolver
from ..types import GraphQLRecordID


_logger = logging.getLogger(__name__)

_name = "removeById"


def remove_by_id(model, type_composer, *, type_storage):
    """
    Build a mutation resolver that removes one record by its ``_id``.

    ``model`` must provide ``delete_by_id_query(record_id)``, returning an
    unexecuted query with an async ``execute()``. Resolving with a
    ``before_query`` param passes that query through ``before_query`` before
    it is executed, which allows callers to add filters.

    The resolver always resolves to ``{"recordId": ..., "record": ...}``,
    where ``record`` is ``None`` if nothing matched.
    """
    async def resolve(params):
        args = params.get("args")
        if args is None or is_empty_value(args.get("_id")):
            raise ArgumentValidationError("{} resolver requires args._id value".format(_name))

        record_id = args["_id"]
        query = model.delete_by_id_query(record_id)

        before_query = params.get("before_query")
        if before_query is not None:
            query = before_query(query)
            if inspect.isawaitable(query):
                query = await query

        record = await query.execute()
        _logger.debug("%s %r on %r removed %s", _name, record_id, model, "one record" if record is not None else "nothing")

        return {
            "recordId": record_id,
            "record": record,
        }

    return Resolver(
        name=_name,
        kind="mutation",
        description=(
            "Remove one record by its id. "
            "Returns the id and the removed record, which is null if no record matched."
        ),
        output_type=lambda: build_payload_type(type_composer, type_storage=type_storage),
        args={
            "_id": Arg(type=graphql.GraphQLNonNull(GraphQLRecordID)),
        },
        resolve=resolve,
    )


def build_payload_type(type_composer, *, type_storage):
    name = payload_type_name(_name, type_composer.get_type_name())

    def create_payload_type():
        return graphql.GraphQLObjectType(
            name=name,
            fields=lambda: {
                "recordId": graphql.GraphQLField(
                    type_=GraphQLRecordID,
                    description="Id of the removed record.",
                ),
                "record": graphql.GraphQLField(
                    type_=type_composer.get_type(),
                    description="Removed record, or null if no record matched.",
                ),
            },
        )

    return type_storage.get_or_set(name, create_payload_type)
