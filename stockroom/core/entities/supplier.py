"""Supplier directory entities."""

from pydantic import BaseModel


class Supplier(BaseModel):
    """A supplier that purchases are recorded against."""

    id: int | None = None
    name: str
    phone: str
    email: str
    contact_person: str | None = None
    address: str | None = None
