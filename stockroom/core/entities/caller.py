"""Authenticated caller identity."""

from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    """Roles known to the access rules."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"


class CallerIdentity(BaseModel):
    """Identity of the principal making a request.

    Produced by the authentication collaborator and handed to the engine
    explicitly; nothing reads it from ambient state.
    """

    username: str
    role: Role = Role.STAFF

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles
