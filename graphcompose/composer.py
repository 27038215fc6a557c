import graphql
import sqlalchemy

from . import iterables
from .errors import ComposeError
from .naming import snake_case_to_camel_case
from .types import GraphQLRecordID


class TypeComposer(object):
    def __init__(self, graphql_type):
        if not isinstance(graphql_type, graphql.GraphQLObjectType):
            raise ComposeError("TypeComposer requires a GraphQLObjectType but got {!r}".format(graphql_type))

        self._type = graphql_type

    def get_type(self):
        return self._type

    def get_type_name(self):
        return self._type.name

    def get_field_names(self):
        return list(self._type.fields)

    def has_field(self, name):
        return name in self._type.fields

    def get_field(self, name):
        field = self._type.fields.get(name)
        if field is None:
            raise ComposeError("{} has no field {}".format(self._type.name, name))
        else:
            return field

    def __repr__(self):
        return "TypeComposer(name={!r})".format(self._type.name)


def compose_with_sqlalchemy(model, *, type_storage, name=None, description=None, only_fields=None, remove_fields=None):
    """
    Build a type composer for a SQLAlchemy declarative model.

    Each mapped column becomes a field of a GraphQL object type, named by
    converting the attribute name to camel case. The type is registered in
    ``type_storage`` under its name, and an already registered type of the
    same name is reused as is.

    ``only_fields`` and ``remove_fields`` restrict the exposed columns by
    attribute name.
    """
    if name is None:
        name = model.__name__

    mapper = sqlalchemy.inspect(model)

    column_attrs = [
        column_attr
        for column_attr in mapper.column_attrs
        if (only_fields is None or column_attr.key in only_fields) and
            (remove_fields is None or column_attr.key not in remove_fields)
    ]

    def create_type():
        fields = iterables.to_dict(
            (snake_case_to_camel_case(column_attr.key), _to_graphql_field(name, column_attr))
            for column_attr in column_attrs
        )
        return graphql.GraphQLObjectType(name=name, description=description, fields=fields)

    return TypeComposer(type_storage.get_or_set(name, create_type))


def _to_graphql_field(type_name, column_attr):
    column = column_attr.columns[0]
    graphql_type = _column_to_graphql_type(type_name, column_attr.key, column)

    if not column.nullable or column.primary_key:
        graphql_type = graphql.GraphQLNonNull(graphql_type)

    attribute_name = column_attr.key

    def resolve(record, info):
        return getattr(record, attribute_name)

    return graphql.GraphQLField(
        type_=graphql_type,
        resolve=resolve,
        description=column.doc or column.comment,
    )


def _column_to_graphql_type(type_name, key, column):
    column_type = column.type

    if column.primary_key:
        return GraphQLRecordID
    elif isinstance(column_type, sqlalchemy.Boolean):
        return graphql.GraphQLBoolean
    elif isinstance(column_type, sqlalchemy.Integer):
        return graphql.GraphQLInt
    elif isinstance(column_type, (sqlalchemy.Float, sqlalchemy.Numeric)):
        return graphql.GraphQLFloat
    elif isinstance(column_type, (sqlalchemy.Enum, sqlalchemy.String)):
        return graphql.GraphQLString
    else:
        raise ComposeError("unsupported column type for {}.{}: {}".format(type_name, key, column_type))
