"""
Data models for Flight Manager.
Contains the flight record and its category tag.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, Tuple
from enum import Enum


class FlightCategory(Enum):
    """Enum for the kind of flight chosen when a record is created"""
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


@dataclass
class FlightRecord:
    """
    Represents one scheduled flight.

    All fields are free-form text and are not validated. Only the gate
    changes after creation. The category is not persisted, so records
    read back from the database have no category.
    """
    flight_number: str
    airline: str
    departure_time: str
    arrival_time: str
    terminal: str
    gate: str
    category: Optional[FlightCategory] = FlightCategory.DOMESTIC

    def __str__(self) -> str:
        return (
            "Flight{"
            f"flightNumber='{self.flight_number}', "
            f"airline='{self.airline}', "
            f"departureTime='{self.departure_time}', "
            f"arrivalTime='{self.arrival_time}', "
            f"terminal='{self.terminal}', "
            f"gate='{self.gate}'"
            "}"
        )

    def summary(self) -> str:
        """Return the one-line listing used for database rows"""
        return (
            f"Flight: {self.flight_number} | Airline: {self.airline} | "
            f"Departure: {self.departure_time} | Arrival: {self.arrival_time} | "
            f"Terminal: {self.terminal} | Gate: {self.gate}"
        )

    def as_row(self) -> Tuple[str, str, str, str, str, str]:
        """Return the six stored columns in table order"""
        return (
            self.flight_number,
            self.airline,
            self.departure_time,
            self.arrival_time,
            self.terminal,
            self.gate,
        )

    @classmethod
    def from_row(cls, row: Tuple[Any, ...]) -> "FlightRecord":
        """
        Build a record from a database row.

        Args:
            row: Column values in table order

        Returns:
            FlightRecord: Record without a category
        """
        values = ["" if value is None else str(value) for value in row[:6]]
        return cls(*values, category=None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        data = asdict(self)
        data["category"] = self.category.value if self.category else None
        return data
