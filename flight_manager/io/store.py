"""
MySQL storage for Flight Manager.
Runs the insert, select, update and delete statements against the flights table.
"""

import logging
from contextlib import closing, contextmanager
from typing import Any, Callable, Iterator, List, Sequence, Tuple

import mysql.connector
from mysql.connector.constants import ClientFlag

from ..config.constants import FLIGHTS_TABLE, FLIGHT_COLUMNS
from ..config.settings import DatabaseConfig
from ..data.models import FlightRecord
from ..errors import StoreError

# Configure logger
logger = logging.getLogger("flight_manager.io.store")

_COLUMN_LIST = ", ".join(FLIGHT_COLUMNS)

INSERT_QUERY = (
    f"INSERT INTO {FLIGHTS_TABLE} ({_COLUMN_LIST}) "
    f"VALUES ({', '.join(['%s'] * len(FLIGHT_COLUMNS))})"
)
SELECT_ALL_QUERY = f"SELECT {_COLUMN_LIST} FROM {FLIGHTS_TABLE}"
UPDATE_GATE_QUERY = f"UPDATE {FLIGHTS_TABLE} SET gate = %s WHERE flight_number = %s"
DELETE_QUERY = f"DELETE FROM {FLIGHTS_TABLE} WHERE flight_number = %s"


class FlightStore:
    """
    Persistent store for flight records.
    Wraps a single open database connection; every statement is committed
    as soon as it runs and every outcome is printed to the console.
    """

    def __init__(self, connection: Any, echo: Callable[[str], None] = print):
        """
        Initialize the store.

        Args:
            connection: Open DB-API connection to the flights database
            echo: Function used to print outcome lines
        """
        self.connection = connection
        self.echo = echo

    def _run(self, query: str, params: Sequence[Any] = (),
             fetch: bool = False, commit: bool = False) -> Tuple[int, List[Tuple[Any, ...]]]:
        """
        Execute one statement.

        Returns:
            Tuple[int, List]: Affected row count and fetched rows
        """
        logger.debug(f"Executing: {query} {tuple(params)}")
        try:
            with closing(self.connection.cursor()) as cursor:
                cursor.execute(query, tuple(params))
                rows = list(cursor.fetchall()) if fetch else []
                rowcount = cursor.rowcount
            if commit:
                self.connection.commit()
        except mysql.connector.Error as e:
            logger.error(f"Statement failed: {e}")
            raise StoreError(f"Database statement failed: {e}") from e
        return rowcount, rows

    def insert(self, record: FlightRecord) -> None:
        """
        Write one flight as a new row.

        Args:
            record: Flight to store
        """
        self._run(INSERT_QUERY, record.as_row(), commit=True)
        self.echo(f"Flight added to database: {record}")

    def select_all(self) -> List[FlightRecord]:
        """
        Read every stored flight.
        Row order is whatever the database returns.

        Returns:
            List[FlightRecord]: Stored flights, without a category
        """
        _, rows = self._run(SELECT_ALL_QUERY, fetch=True)
        return [FlightRecord.from_row(row) for row in rows]

    def update_gate(self, flight_number: str, new_gate: str) -> int:
        """
        Change the gate of every row with this flight number.

        Args:
            flight_number: Flight to update
            new_gate: New gate value

        Returns:
            int: Number of rows updated, 0 when the flight is not stored
        """
        rowcount, _ = self._run(UPDATE_GATE_QUERY, (new_gate, flight_number), commit=True)
        if rowcount > 0:
            self.echo("Flight updated in database.")
        else:
            self.echo("Flight not found in database.")
        return max(rowcount, 0)

    def delete(self, flight_number: str) -> int:
        """
        Delete every row with this flight number.

        Args:
            flight_number: Flight to delete

        Returns:
            int: Number of rows deleted, 0 when the flight is not stored
        """
        rowcount, _ = self._run(DELETE_QUERY, (flight_number,), commit=True)
        if rowcount > 0:
            self.echo("Flight deleted from database.")
        else:
            self.echo("Flight not found in database.")
        return max(rowcount, 0)


@contextmanager
def connect_store(config: DatabaseConfig,
                  echo: Callable[[str], None] = print) -> Iterator[FlightStore]:
    """
    Open the database connection and yield a store bound to it.
    The connection is closed when the block exits, also on errors.

    Args:
        config: Connection parameters
        echo: Function used to print outcome lines

    Raises:
        StoreError: If the connection cannot be opened
    """
    logger.info(f"Connecting to {config.describe()}")
    try:
        connection = mysql.connector.connect(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.user,
            password=config.password,
            # UPDATE rowcount counts matched rows, not changed rows
            client_flags=[ClientFlag.FOUND_ROWS],
        )
    except mysql.connector.Error as e:
        logger.error(f"Could not connect to {config.describe()}: {e}")
        raise StoreError(f"Could not connect to {config.describe()}: {e}") from e

    try:
        yield FlightStore(connection, echo=echo)
    finally:
        connection.close()
        logger.info("Database connection closed")

