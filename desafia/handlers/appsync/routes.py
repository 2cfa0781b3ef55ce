"Maps graphql `Type.field` coordinates to the functions that resolve them"
import importlib
import re
import sys

FIELD_RE = re.compile(r'^[A-Z]\w*\.[A-Za-z_]\w*$')

# graphql field -> python handler
cache = {}


def clear():
    cache.clear()


def register(field):
    "Decorator to register a handler for an appsync graphql field"
    assert FIELD_RE.match(field), f'Not a `Type.field` graphql coordinate: `{field}`'

    def inner(func):
        assert field not in cache, f'Field `{field}` is already handled by `{cache[field].__name__}`'
        cache[field] = func
        return func

    return inner


def get_handler(field):
    return cache.get(field)


def fields():
    return sorted(cache)


def discover(*paths):
    "Rebuild the routing table from the handlers registered by importing each module"
    cache.clear()
    for path in paths:
        # registration is an import side effect, modules imported earlier have to run again
        if path in sys.modules:
            importlib.reload(sys.modules[path])
        else:
            importlib.import_module(path)
