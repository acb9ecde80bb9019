"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, name, email, password"


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a single user by email.

        Returns:
            A User or None if no user has that email.
        """
        sql = f"SELECT {_COLUMNS} FROM users WHERE email = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (email,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        finally:
            release_connection(conn)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Fetch a single user by primary key, or None."""
        sql = f"SELECT {_COLUMNS} FROM users WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        finally:
            release_connection(conn)

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist.

        Returns:
            The same User with its `id` populated.
        """
        sql = """
            INSERT INTO users (name, password, email)
            VALUES (%s, %s, %s)
            RETURNING id;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user.name, user.password, user.email))
                user.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added user #{user.id} ({user.email})")
            return user
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add user {user.email}: {e}")
            raise
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a database row tuple to a User domain object."""
        return User(id=row[0], name=row[1], email=row[2], password=row[3])
