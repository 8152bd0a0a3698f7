"""
Flight registry for Flight Manager.
Coordinates the in-memory cache and the database for each operation.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from ..data.models import FlightRecord
from ..io.store import FlightStore
from .cache import FlightCache

# Configure logger
logger = logging.getLogger("flight_manager.core.registry")


@dataclass
class OperationOutcome:
    """Result of an update or delete against the cache and the database"""
    cache_hit: bool
    rows_affected: int

    @property
    def found_in_store(self) -> bool:
        return self.rows_affected > 0


class FlightManager(ABC):
    """Operations available to the operator"""

    @abstractmethod
    def add_flight(self, flight: FlightRecord) -> None:
        ...

    @abstractmethod
    def view_flights(self) -> None:
        ...

    @abstractmethod
    def update_flight(self, flight_number: str, new_gate: str) -> OperationOutcome:
        ...

    @abstractmethod
    def delete_flight(self, flight_number: str) -> OperationOutcome:
        ...

    @abstractmethod
    def sync_with_database(self) -> None:
        ...


class HybridFlightManager(FlightManager):
    """
    Flight manager that keeps a session cache next to the database.

    Every operation touches the cache first and the database second.
    The two are never reconciled except by sync_with_database(), and a
    failed database write does not undo the cache change.
    """

    def __init__(self, store: FlightStore, cache: Optional[FlightCache] = None,
                 echo: Callable[[str], None] = print):
        """
        Initialize the manager.

        Args:
            store: Database store
            cache: Optional cache (a new empty cache by default)
            echo: Function used to print outcome lines
        """
        self.store = store
        self.cache = cache if cache is not None else FlightCache()
        self.echo = echo

    def add_flight(self, flight: FlightRecord) -> None:
        self.cache.add(flight)
        self.store.insert(flight)
        logger.info(f"Added flight {flight.flight_number}")

    def view_flights(self) -> None:
        self.echo("Cached Flights:")
        cached = self.cache.list()
        if not cached:
            self.echo("No cached flights.")
        for flight in cached:
            self.echo(str(flight))

        self.echo("\nDatabase Flights:")
        for flight in self.store.select_all():
            self.echo(flight.summary())

    def update_flight(self, flight_number: str, new_gate: str) -> OperationOutcome:
        updated = self.cache.update_gate(flight_number, new_gate)
        if updated is not None:
            self.echo(f"Flight updated in cache: {updated}")

        rows = self.store.update_gate(flight_number, new_gate)

        if updated is None:
            self.echo("Flight not found in cache.")

        logger.info(f"Gate update for {flight_number}: cache_hit={updated is not None}, rows={rows}")
        return OperationOutcome(cache_hit=updated is not None, rows_affected=rows)

    def delete_flight(self, flight_number: str) -> OperationOutcome:
        removed = self.cache.remove_all(flight_number)
        self.echo("Flight removed from cache.")

        rows = self.store.delete(flight_number)

        logger.info(f"Deleted {flight_number}: cached={removed}, rows={rows}")
        return OperationOutcome(cache_hit=removed > 0, rows_affected=rows)

    def sync_with_database(self) -> None:
        self.cache.drain_and_sync(self.store)
        self.echo("Cache synchronized with database.")


def create_flight_manager(store: FlightStore,
                          echo: Callable[[str], None] = print) -> FlightManager:
    """
    Factory function to create the flight manager.

    Args:
        store: Database store the manager writes to
        echo: Function used to print outcome lines

    Returns:
        FlightManager: New manager with an empty cache
    """
    return HybridFlightManager(store, echo=echo)
