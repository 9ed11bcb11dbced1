"""Domain models used in business logic."""
from datetime import datetime

from pydantic import BaseModel, Field


class Contact(BaseModel):
    """A (type, value) pair attached to a client, e.g. email or phone."""
    type: str = Field(default="", description="Contact kind, e.g. 'email'")
    value: str = Field(default="", description="Contact value, e.g. an address")

    model_config = {"frozen": True}

    @property
    def is_complete(self) -> bool:
        return bool(self.type) and bool(self.value)


class Client(BaseModel):
    """
    Domain model for Client used in business logic.

    Instances produced by validation are transient: id and timestamps stay
    None until storage assigns them.
    """
    id: int | None = Field(default=None, description="Storage-assigned client ID")
    name: str
    surname: str
    last_name: str = ""
    contacts: tuple[Contact, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True, "frozen": True}


class FieldError(BaseModel):
    """A single field-level validation problem."""
    field: str
    message: str

    model_config = {"frozen": True}
