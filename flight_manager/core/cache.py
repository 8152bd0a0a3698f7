"""
In-memory flight cache for Flight Manager.
Holds the flights entered during this session until they are synced.
"""

import logging
from typing import Iterator, List, Optional

from ..data.models import FlightRecord
from ..io.store import FlightStore

# Configure logger
logger = logging.getLogger("flight_manager.core.cache")


class FlightCache:
    """
    Ordered list of flight records.
    Duplicates are allowed and nothing is checked against the database.
    """

    def __init__(self):
        self._flights: List[FlightRecord] = []

    def __len__(self) -> int:
        return len(self._flights)

    def __iter__(self) -> Iterator[FlightRecord]:
        return iter(list(self._flights))

    def add(self, record: FlightRecord) -> None:
        """Append a record to the cache"""
        self._flights.append(record)
        logger.debug(f"Cached {record.flight_number} ({len(self._flights)} cached)")

    def update_gate(self, flight_number: str, new_gate: str) -> Optional[FlightRecord]:
        """
        Change the gate of the first cached record with this flight number.
        Later duplicates are left untouched.

        Args:
            flight_number: Flight to update
            new_gate: New gate value

        Returns:
            Optional[FlightRecord]: The updated record, or None if not cached
        """
        for record in self._flights:
            if record.flight_number == flight_number:
                record.gate = new_gate
                return record
        return None

    def remove_all(self, flight_number: str) -> int:
        """
        Remove every cached record with this flight number.

        Returns:
            int: Number of records removed
        """
        before = len(self._flights)
        self._flights = [r for r in self._flights if r.flight_number != flight_number]
        removed = before - len(self._flights)
        logger.debug(f"Removed {removed} cached record(s) for {flight_number}")
        return removed

    def list(self) -> List[FlightRecord]:
        """Get the cached records in insertion order"""
        return list(self._flights)

    def clear(self) -> None:
        self._flights.clear()

    def drain_and_sync(self, store: FlightStore) -> int:
        """
        Insert every cached record into the store, then empty the cache.
        Records that were already stored are inserted again.
        If an insert fails the error propagates and the cache is kept.

        Args:
            store: Store receiving the records

        Returns:
            int: Number of records inserted
        """
        pending = list(self._flights)
        for record in pending:
            store.insert(record)
        self.clear()
        logger.info(f"Synced {len(pending)} cached flight(s) to the database")
        return len(pending)
