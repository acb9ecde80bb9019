"""
services/user_service.py
-------------------------
Business logic for user lookup and registration.
"""

from typing import Optional

from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Validates user input before handing it to the UserRepository."""

    def __init__(self):
        self.repo = UserRepository()

    def find_by_email(self, email: str) -> Optional[User]:
        if not email or not email.strip():
            raise ValueError("Email is required.")
        return self.repo.get_by_email(email.strip().lower())

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.repo.get_by_id(user_id)

    def register(self, name: str, email: str, password: str) -> User:
        """
        Create a new user account.

        Args:
            name: Display name.
            email: Login email (stored lower-cased).
            password: Value stored as-is in the password column.

        Returns:
            The saved User with its id.

        Raises:
            ValueError: If a field is blank or the email is already taken.
        """
        name = (name or "").strip()
        email = (email or "").strip().lower()
        if not name or not email or not password:
            raise ValueError("Name, email and password are all required.")
        if self.repo.get_by_email(email) is not None:
            logger.warning(f"Registration rejected, email already in use: {email}")
            raise ValueError(f"A user with email {email} already exists.")
        return self.repo.add(User(name=name, email=email, password=password))
