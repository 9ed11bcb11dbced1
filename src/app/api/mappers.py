"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Client, FieldError
from src.client.schemas import (
    ClientResponse,
    ContactSchema,
    FieldErrorResponse,
    ValidationErrorResponse,
)


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Persisted domain model

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        name=client.name,
        surname=client.surname,
        last_name=client.last_name,
        contacts=[ContactSchema(type=c.type, value=c.value) for c in client.contacts],
        created_at=client.created_at,
        updated_at=client.updated_at,
    )


def to_validation_error_response(errors: list[FieldError]) -> ValidationErrorResponse:
    return ValidationErrorResponse(
        errors=[FieldErrorResponse(field=e.field, message=e.message) for e in errors]
    )
