import graphql
from graphql.language import IntValueNode, StringValueNode


def _coerce_record_id(value):
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise graphql.GraphQLError("RecordID cannot represent value: {!r}".format(value))
    else:
        return value


def _parse_record_id_literal(value_node, variables=None):
    if isinstance(value_node, IntValueNode):
        return int(value_node.value)
    elif isinstance(value_node, StringValueNode):
        return value_node.value
    else:
        raise graphql.GraphQLError(
            "RecordID cannot represent literal: {}".format(graphql.print_ast(value_node)),
            value_node,
        )


GraphQLRecordID = graphql.GraphQLScalarType(
    name="RecordID",
    description="The primary key of a stored record, as an integer or a string.",
    serialize=_coerce_record_id,
    parse_value=_coerce_record_id,
    parse_literal=_parse_record_id_literal,
)
