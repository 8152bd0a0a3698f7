"""
Command-line interface for Flight Manager.
Provides the interactive menu used by the operator.
"""

import logging
from typing import Callable, Dict, Optional

from ..core.registry import FlightManager
from ..data.models import FlightRecord, FlightCategory
from ..config.constants import (
    APP_NAME,
    MENU_ADD,
    MENU_VIEW,
    MENU_UPDATE,
    MENU_DELETE,
    MENU_SYNC,
    MENU_EXIT,
)

# Configure logger
logger = logging.getLogger("flight_manager.ui.cli")

MENU_LINES = (
    f"{MENU_ADD}. Add Flight",
    f"{MENU_VIEW}. View Flights",
    f"{MENU_UPDATE}. Update Flight",
    f"{MENU_DELETE}. Delete Flight",
    f"{MENU_SYNC}. Sync Cache with Database",
    f"{MENU_EXIT}. Exit",
)


class CLI:
    """
    Command-line interface for Flight Manager.
    Reads menu choices and field values line by line and hands them to
    the flight manager. Database errors are not handled here.
    """

    def __init__(self,
                 manager: FlightManager,
                 input_func: Optional[Callable[[str], str]] = None,
                 echo: Callable[[str], None] = print,
                 default_category: FlightCategory = FlightCategory.DOMESTIC):
        """
        Initialize the CLI.

        Args:
            manager: Flight manager that performs the operations
            input_func: Function that prompts for and returns one line (input by default)
            echo: Function used to print output
            default_category: Category given to new flights
        """
        self.manager = manager
        self.input = input_func or input
        self.echo = echo
        self.default_category = default_category
        self._handlers: Dict[int, Callable[[], None]] = {
            MENU_ADD: self._add_flight,
            MENU_VIEW: self.manager.view_flights,
            MENU_UPDATE: self._update_flight,
            MENU_DELETE: self._delete_flight,
            MENU_SYNC: self.manager.sync_with_database,
        }

    def run(self) -> None:
        """
        Run the menu loop until the operator chooses Exit or input ends.
        """
        logger.info("CLI started")
        while True:
            self._print_menu()
            try:
                choice = self._read_choice()
                if choice == MENU_EXIT:
                    self.echo("Exiting system...")
                    break

                handler = self._handlers.get(choice) if choice is not None else None
                if handler is None:
                    self.echo("Invalid choice. Please try again.")
                    continue

                handler()
            except EOFError:
                self.echo("\nExiting system...")
                break
        logger.info("CLI exited")

    def _print_menu(self) -> None:
        self.echo(f"\n=== {APP_NAME} ===")
        for line in MENU_LINES:
            self.echo(line)

    def _read_choice(self) -> Optional[int]:
        raw = self.input("Enter your choice: ").strip()
        try:
            return int(raw)
        except ValueError:
            logger.debug(f"Non-numeric menu choice: {raw!r}")
            return None

    def _add_flight(self) -> None:
        flight = FlightRecord(
            flight_number=self.input("Enter flight number: "),
            airline=self.input("Enter airline: "),
            departure_time=self.input("Enter departure time (HH:mm): "),
            arrival_time=self.input("Enter arrival time (HH:mm): "),
            terminal=self.input("Enter terminal: "),
            gate=self.input("Enter gate: "),
            category=self.default_category,
        )
        self.manager.add_flight(flight)

    def _update_flight(self) -> None:
        flight_number = self.input("Enter flight number to update: ")
        new_gate = self.input("Enter new gate: ")
        self.manager.update_flight(flight_number, new_gate)

    def _delete_flight(self) -> None:
        flight_number = self.input("Enter flight number to delete: ")
        self.manager.delete_flight(flight_number)
