"""Normalization and validation of raw client payloads."""
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from src.app.core.domain.models import Client, Contact, FieldError
from src.shared.exceptions import ValidationFailed

NAME_REQUIRED = FieldError(field="name", message="name is required")
SURNAME_REQUIRED = FieldError(field="surname", message="surname is required")
CONTACTS_INCOMPLETE = FieldError(field="contacts", message="one or more contacts incomplete")


def _as_string(value: Any) -> str:
    """
    Coerce a scalar to a trimmed string the way the JSON clients expect.

    Falsy scalars (null, false, 0, "") become empty, true becomes "true" and
    integral floats drop their fraction. Arrays and objects become empty.
    """
    if isinstance(value, (list, dict)) or not value:
        return ""
    if value is True:
        return "true"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value).strip()
    return ""


def _as_contact_list(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, dict) else {} for item in value]


CoercedStr = Annotated[str, BeforeValidator(_as_string)]


class ContactInput(BaseModel):
    """Lenient shape of a contact as received over the wire."""
    type: CoercedStr = ""
    value: CoercedStr = ""


class ClientInput(BaseModel):
    """Lenient shape of a client as received over the wire. Never fails to parse."""
    name: CoercedStr = ""
    surname: CoercedStr = ""
    last_name: CoercedStr = Field(default="", alias="lastName")
    contacts: Annotated[list[ContactInput], BeforeValidator(_as_contact_list)] = Field(default_factory=list)


def validate_client(data: Any) -> Client:
    """
    Turn an arbitrary decoded JSON value into a canonical, transient Client.

    All rules are evaluated before failing, so the raised error carries every
    problem at once. Incomplete contacts produce a single aggregate error.

    Args:
        data: Decoded request body; non-objects are treated as an empty object

    Returns:
        Client without id or timestamps

    Raises:
        ValidationFailed: If any rule is violated
    """
    raw = ClientInput.model_validate(data if isinstance(data, dict) else {})
    contacts = tuple(Contact(type=c.type, value=c.value) for c in raw.contacts)

    errors: list[FieldError] = []
    if not raw.name:
        errors.append(NAME_REQUIRED)
    if not raw.surname:
        errors.append(SURNAME_REQUIRED)
    if not all(contact.is_complete for contact in contacts):
        errors.append(CONTACTS_INCOMPLETE)

    if errors:
        raise ValidationFailed(errors)

    return Client(
        name=raw.name,
        surname=raw.surname,
        last_name=raw.last_name,
        contacts=contacts,
    )
