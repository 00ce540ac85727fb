"""Tables, reservations and orders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from restodesk.users import User


@dataclass
class Table:
    """A table in the restaurant, free until it is reserved."""

    id: int
    seats: int
    available: bool = True

    def describe(self) -> str:
        """Return the table's number, seat count and state on one line."""
        state = "Disponibila" if self.available else "Ocupata"
        return f"Masa #{self.id} ({self.seats} locuri) - {state}"


@dataclass(frozen=True)
class Reservation:
    """A table booked by a client for a given date and time."""

    table: Table
    client: User
    date_time: str

    def describe(self) -> str:
        """Return the confirmation text, preceded by a blank line."""
        return "\n".join(
            [
                "",
                "Rezervare confirmata:",
                f"Client: {self.client.name}",
                f"Contact: {self.client.contact}",
                f"Masa: #{self.table.id} ({self.table.seats} locuri)",
                f"Data si ora: {self.date_time}",
            ]
        )


@dataclass(frozen=True)
class Order:
    """Items ordered under a reservation, with their total price."""

    reservation: Reservation
    items: tuple[str, ...]
    total: float

    def __init__(self, reservation: Reservation, items: Iterable[str], total: float) -> None:
        object.__setattr__(self, "reservation", reservation)
        object.__setattr__(self, "items", tuple(items))
        object.__setattr__(self, "total", float(total))

    def describe(self) -> str:
        """Return the order confirmation text, preceded by a blank line."""
        lines = [
            "",
            "Comanda confirmata:",
            f"Client: {self.reservation.client.name}",
            f"Masa: #{self.reservation.table.id}",
            "Produse comandate:",
        ]
        lines.extend(f"- {item}" for item in self.items)
        lines.append(f"Total: {self.total:g} RON")
        return "\n".join(lines)