# src/squadforge/db/functions.py

"""SQL functions shared by the store and the engines.

SQLite's built-in ``lower()`` only folds ASCII letters, so SQLite
connections get a Unicode-aware ``unicode_lower()`` registered on connect.
Other backends compile ``unicode_lower`` to their native ``lower()``.
"""

from sqlalchemy import String, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class unicode_lower(FunctionElement):
    """Lower-case a string expression, including non-ASCII letters."""

    type = String()
    name = "unicode_lower"
    inherit_cache = True


@compiles(unicode_lower)
def _compile_unicode_lower(element, compiler, **kw):
    return "lower(%s)" % compiler.process(element.clauses, **kw)


@compiles(unicode_lower, "sqlite")
def _compile_unicode_lower_sqlite(element, compiler, **kw):
    return "unicode_lower(%s)" % compiler.process(element.clauses, **kw)


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


def register_sqlite_functions(engine: Engine) -> None:
    """Install the Python-backed SQL functions on every new SQLite connection.

    Pass the sync engine; for an async engine that is ``engine.sync_engine``.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("unicode_lower", 1, _lower)
