"""
models/reservation.py
---------------------
Domain model for reservations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.property import Property


@dataclass
class Reservation:
    """
    A guest's stay at a property.

    Attributes:
        guest_id: The user who booked.
        property_id: The booked property.
        start_date: First night.
        end_date: Checkout date.
        id: Database primary key (None for new records).
        listing: The joined property (with its average rating) when loaded
            through a reservation listing query.
    """
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    id: Optional[int] = None
    listing: Optional[Property] = None

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        title = self.listing.title if self.listing else f"property #{self.property_id}"
        return f"#{self.id} {title} | {self.start_date} -> {self.end_date} ({self.nights} nights)"
