"""People who use the restaurant system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class User(ABC):
    """Someone known to the restaurant by name and contact details."""

    name: str
    contact: str

    @abstractmethod
    def role_description(self) -> str:
        """Return a one-line description of the user's role."""


@dataclass
class Employee(User):
    """A member of staff who may log in with a username and password."""

    position: str
    _username: str = field(default="", init=False, repr=False)
    _password: str = field(default="", init=False, repr=False, compare=False)

    def set_credentials(self, username: str, password: str) -> None:
        """Set the username and password this employee logs in with."""
        self._username = username
        self._password = password

    def authenticate(self, username: str, password: str) -> bool:
        """Return True if the given credentials match the stored ones."""
        return username == self._username and password == self._password

    def role_description(self) -> str:
        return f"Rol: Angajat - {self.name} ({self.position})"