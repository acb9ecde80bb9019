"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
"""

from config import DEFAULT_RESULT_LIMIT
from db.connection import get_connection, release_connection
from models.reservation import Reservation
from repositories.property_repo import PROPERTY_COLUMNS, row_to_property
from utils.logger import get_logger

logger = get_logger(__name__)

_RESERVATION_COLUMNS = ", ".join(
    f"reservations.{c}" for c in ("id", "guest_id", "property_id", "start_date", "end_date")
)
_PROPERTY_COLUMNS = ", ".join(f"properties.{c}" for c in PROPERTY_COLUMNS)


class ReservationRepository:
    """Repository for read queries on the reservations table."""

    def get_past_for_guest(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        """
        Fetch a guest's completed stays.

        Each reservation is joined with its property and that property's
        average review rating.

        Args:
            guest_id: The user who made the reservations.
            limit: Maximum number of reservations to return.

        Returns:
            List of Reservation objects ordered by start_date.
        """
        sql = f"""
            SELECT {_RESERVATION_COLUMNS}, {_PROPERTY_COLUMNS},
                   AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON properties.id = reservations.property_id
            LEFT JOIN property_reviews ON property_reviews.property_id = reservations.property_id
            WHERE reservations.guest_id = %s AND reservations.end_date < now()::date
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (guest_id, limit))
                return [self._row_to_reservation(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_reservation(row: tuple) -> Reservation:
        """Convert a reservation+property row to a Reservation with its listing."""
        return Reservation(
            id=row[0],
            guest_id=row[1],
            property_id=row[2],
            start_date=row[3],
            end_date=row[4],
            listing=row_to_property(row, offset=5),
        )
