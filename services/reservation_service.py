"""
services/reservation_service.py
--------------------------------
Business logic for listing a guest's reservations.
"""

from config import DEFAULT_RESULT_LIMIT
from models.reservation import Reservation
from repositories.reservation_repo import ReservationRepository


class ReservationService:
    """Reads reservations and renders them for display."""

    def __init__(self):
        self.repo = ReservationRepository()

    def past_reservations(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        if limit <= 0:
            raise ValueError("Limit must be a positive number.")
        return self.repo.get_past_for_guest(guest_id, limit)

    def summary(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> str:
        """Get a printable list of a guest's past stays."""
        reservations = self.past_reservations(guest_id, limit)
        if not reservations:
            return f"No past reservations for guest #{guest_id}."

        lines = [f"Past reservations for guest #{guest_id}:"]
        for r in reservations:
            line = f"  {r}"
            if r.listing and r.listing.average_rating is not None:
                line += f" | rating {r.listing.average_rating:.1f}"
            lines.append(line)
        return "\n".join(lines)
