"""
models/user.py
--------------
Domain model for LightBnB users (guests and owners).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    A registered user.

    Attributes:
        name: Display name.
        email: Login email, unique across users.
        password: Stored password value as handed in by the caller.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"
