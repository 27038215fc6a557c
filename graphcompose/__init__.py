from .composer import compose_with_sqlalchemy, TypeComposer
from .errors import ArgumentValidationError, ComposeError
from .resolver import Arg, Resolver
from .resolvers import build_payload_type, remove_by_id
from .sqlalchemy import RemoveQuery, SqlAlchemyModel
from .type_storage import TypeStorage
from .types import GraphQLRecordID


__all__ = [
    "compose_with_sqlalchemy",
    "TypeComposer",

    "ArgumentValidationError",
    "ComposeError",

    "Arg",
    "Resolver",

    "build_payload_type",
    "remove_by_id",

    "RemoveQuery",
    "SqlAlchemyModel",

    "TypeStorage",

    "GraphQLRecordID",
]
