"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mysql.connector.constants import ClientFlag

from flight_manager.data.models import FlightRecord, FlightCategory
from flight_manager.io.store import (
    FlightStore,
    INSERT_QUERY,
    SELECT_ALL_QUERY,
    UPDATE_GATE_QUERY,
    DELETE_QUERY,
)


class FakeCursor:
    """DB-API cursor over the rows held by a FakeConnection."""

    def __init__(self, connection):
        self.connection = connection
        self.rowcount = -1
        self._result = []

    def execute(self, query, params=()):
        self.connection.executed.append((query, tuple(params)))
        if self.connection.fail_with is not None:
            raise self.connection.fail_with

        table = self.connection.rows
        if query == INSERT_QUERY:
            table.append(list(params))
            self.rowcount = 1
        elif query == SELECT_ALL_QUERY:
            self._result = [tuple(row) for row in table]
            self.rowcount = len(self._result)
        elif query == UPDATE_GATE_QUERY:
            new_gate, flight_number = params
            matches = [row for row in table if row[0] == flight_number]
            changed = [row for row in matches if row[5] != new_gate]
            for row in matches:
                row[5] = new_gate
            # MySQL reports changed rows unless FOUND_ROWS was requested
            self.rowcount = len(matches) if self.connection.found_rows else len(changed)
        elif query == DELETE_QUERY:
            (flight_number,) = params
            before = len(table)
            table[:] = [row for row in table if row[0] != flight_number]
            self.rowcount = before - len(table)
        else:
            raise AssertionError(f"Unexpected query: {query}")

    def fetchall(self):
        return self._result

    def close(self):
        self.connection.cursors_closed += 1


class FakeConnection:
    """Stands in for a MySQL connection, keeping the flights table in a list."""

    def __init__(self):
        self.rows = []
        self.executed = []
        self.commits = 0
        self.cursors_closed = 0
        self.closed = False
        self.fail_with = None
        self.found_rows = False
        self.connect_kwargs = None

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def close(self):
        self.closed = True

    def open(self, **kwargs):
        """Act as mysql.connector.connect, honouring the requested client flags."""
        self.connect_kwargs = kwargs
        self.found_rows = ClientFlag.FOUND_ROWS in kwargs.get("client_flags", [])
        return self

    def inserts(self):
        """Parameters of every INSERT executed so far."""
        return [params for query, params in self.executed if query == INSERT_QUERY]


@pytest.fixture
def connection():
    """Provide an empty fake database connection."""
    return FakeConnection()


@pytest.fixture
def output():
    """Collect console lines instead of printing them."""
    return []


@pytest.fixture
def store(connection, output):
    """Provide a store over the fake connection."""
    return FlightStore(connection, echo=output.append)


@pytest.fixture
def sample_flight():
    """Provide the AA100 flight used across tests."""
    return FlightRecord(
        flight_number="AA100",
        airline="Delta",
        departure_time="10:00",
        arrival_time="12:00",
        terminal="T1",
        gate="G5",
    )


@pytest.fixture
def make_flight():
    """Build flights with sensible defaults for the fields a test ignores."""
    def _make(flight_number="AA100", gate="G5", category=FlightCategory.DOMESTIC, **fields):
        values = {
            "airline": "Delta",
            "departure_time": "10:00",
            "arrival_time": "12:00",
            "terminal": "T1",
        }
        values.update(fields)
        return FlightRecord(flight_number=flight_number, gate=gate, category=category, **values)
    return _make
