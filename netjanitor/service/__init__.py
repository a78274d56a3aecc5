"""
Registry of named service factories, grouped by scope.

``service().runtime.get("docker")`` returns the factory registered as
``runtime.docker``.
"""


class _Scope(object):
    def __init__(self):
        self._entries = {}

    def register(self, identifier, obj):
        if '.' not in identifier:
            assert (identifier not in self._entries
                    or self._entries[identifier] == obj)
            self._entries[identifier] = obj
        else:
            scope, key = identifier.split('.', 1)
            if scope not in self._entries:
                self._entries[scope] = _Scope()
            self._entries[scope].register(key, obj)

    def get(self, key):
        """Return the entry registered under key, or raise KeyError."""
        return self._entries[key]

    def names(self):
        return sorted(self._entries)

    def clear(self, thisIsATest=False):
        assert thisIsATest
        self._entries.clear()

    def __getattr__(self, key):
        if key.startswith('_') or key not in self._entries:
            raise AttributeError(key)
        return self._entries[key]


__REGISTRY = _Scope()


def service():
    return __REGISTRY
