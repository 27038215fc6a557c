import graphql

from . import iterables
from .errors import ComposeError
from .memo import memoize


class Arg(object):
    def __init__(self, type, description=None):
        self.type = type
        self.description = description

    def __repr__(self):
        return "Arg(type={})".format(self.type)


class Resolver(object):
    """
    Named, typed and executable description of a single GraphQL field.

    ``output_type`` may be a GraphQL type or a function returning one: the
    function is called on the first call to ``get_output_type`` and its
    result is kept for the lifetime of the resolver.

    ``resolve`` is an async function that receives a single mapping of
    resolve params: ``args``, along with ``source``, ``context`` and ``info``
    when called from a GraphQL schema, and any resolver-specific hooks.
    """

    def __init__(self, *, name, kind, output_type, args, resolve, description=None):
        self.name = name
        self.kind = kind
        self.description = description
        self._output_type = memoize(output_type)
        self._args = dict(args)
        self._resolve = resolve

    def get_output_type(self):
        return self._output_type()

    def has_arg(self, name):
        return name in self._args

    def get_arg(self, name):
        arg = self._args.get(name)
        if arg is None:
            raise ComposeError("{} resolver has no arg {}".format(self.name, name))
        else:
            return arg

    def get_args(self):
        return dict(self._args)

    def resolve(self, params):
        return self._resolve(params)

    def get_field_config(self):
        def resolve_field(source, info, **args):
            return self.resolve({
                "source": source,
                "args": args,
                "context": info.context,
                "info": info,
            })

        return graphql.GraphQLField(
            type_=self.get_output_type(),
            args=iterables.to_dict(
                (name, graphql.GraphQLArgument(type_=arg.type, description=arg.description))
                for name, arg in self._args.items()
            ),
            resolve=resolve_field,
            description=self.description,
        )

    def __repr__(self):
        return "Resolver(name={!r}, kind={!r})".format(self.name, self.kind)
