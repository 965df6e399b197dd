import pytest


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rows = []
        self.closed = False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.fail_sql and self.conn.fail_sql in sql:
            raise RuntimeError("query failed")
        self.rows = list(self.conn.results.get(sql, []))
        return self

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        self.closed = True


class FakeDBAPIConnection:
    """DBAPI connection answering queries from a ``{sql: rows}`` mapping."""

    def __init__(self, results=None, fail_sql=None):
        self.results = results or {}
        self.fail_sql = fail_sql
        self.executed = []
        self.close_calls = 0

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.close_calls += 1


class FakeOpener:
    def __init__(self, connection=None, error=None):
        self.connection = connection or FakeDBAPIConnection()
        self.error = error
        self.calls = []

    def open(self, dsn, username=None, password=None):
        self.calls.append((dsn, username, password))
        if self.error is not None:
            raise self.error
        return self.connection


@pytest.fixture
def fake_connection():
    return FakeDBAPIConnection()


@pytest.fixture
def fake_opener(fake_connection):
    return FakeOpener(fake_connection)


@pytest.fixture(autouse=True)
def _clear_vertica_env(monkeypatch):
    for name in (
        "VERTICA_DSN", "VERTICA_HOST", "VERTICA_PORT", "VERTICA_DBNAME",
        "VERTICA_USER", "VERTICA_PASSWORD", "VERTICA_ODBC_DRIVER",
        "VERTICA_DSN_SETTINGS", "VERTICA_SCHEMA_NAME",
        "VERTICA_CONNECTION_SETTINGS", "VERTICA_METRICS_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
