import logging
import threading


_logger = logging.getLogger(__name__)


class TypeStorage(object):
    """
    Registry of generated GraphQL types, keyed by type name.

    A storage belongs to one schema-build pass: every type composer and
    resolver built for the same schema should share it, so that a type name
    always refers to a single type instance.
    """

    def __init__(self):
        self._types = {}
        self._lock = threading.Lock()

    def get(self, name, default=None):
        return self._types.get(name, default)

    def has(self, name):
        return name in self._types

    def set(self, name, graphql_type):
        with self._lock:
            self._types[name] = graphql_type

    def get_or_set(self, name, create):
        """
        Return the type stored under ``name``, calling ``create()`` and
        storing its result if there is none.

        ``create`` is called while holding the storage lock, so concurrent
        callers always converge on the same instance.
        """
        with self._lock:
            graphql_type = self._types.get(name)
            if graphql_type is None:
                _logger.debug("creating type %s", name)
                graphql_type = self._types[name] = create()
            else:
                _logger.debug("reusing stored type %s", name)

            return graphql_type

    def clear(self):
        with self._lock:
            self._types.clear()

    def __repr__(self):
        return "TypeStorage(names={!r})".format(sorted(self._types))
