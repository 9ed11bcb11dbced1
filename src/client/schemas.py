"""API schemas for client requests and responses."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContactSchema(BaseModel):
    """A single contact entry as exchanged over the API."""
    type: str = Field(..., description="Contact kind, e.g. 'email' or 'phone'")
    value: str = Field(..., description="Contact value")


class ClientRequest(BaseModel):
    """
    Request schema for creating or updating a client.

    The server is the authority on validation; this schema only shapes the
    payload, so it can also carry data the server will reject.
    """
    name: str = ""
    surname: str = ""
    last_name: str = ""
    contacts: list[ContactSchema] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    name: str
    surname: str
    last_name: str = ""
    contacts: list[ContactSchema] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FieldErrorResponse(BaseModel):
    """One field-level validation problem."""
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body of a 422 response: every problem found in the submitted client."""
    errors: list[FieldErrorResponse]


class MessageResponse(BaseModel):
    """Body of a 404, 405, 413 or 500 response."""
    message: str
