import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Client, Contact
from src.app.infrastructure.entities.client_entity import ClientEntity

logger = logging.getLogger(__name__)

_contacts_adapter = TypeAdapter(tuple[Contact, ...])


class ClientMapper(BaseEntityMapper[Client, ClientEntity]):
    """Mapper for converting between Client domain model and ClientEntity."""

    @staticmethod
    def dump_contacts(contacts: tuple[Contact, ...]) -> str:
        """Serialize contacts to the JSON text stored in the contacts column."""
        return _contacts_adapter.dump_json(contacts).decode("utf-8")

    @staticmethod
    def load_contacts(raw: str | None) -> tuple[Contact, ...]:
        """
        Deserialize the contacts column.

        NULL, empty text and text that is not a JSON array of contacts all mean
        no contacts, so one bad row cannot break a listing.
        """
        if not raw:
            return ()
        try:
            return _contacts_adapter.validate_json(raw)
        except ValidationError:
            logger.warning("Ignoring undecodable contacts column: %.80r", raw)
            return ()

    @staticmethod
    def to_values(model_instance: Client) -> dict[str, Any]:
        """Column values for the mutable fields, keyed by entity attribute."""
        return {
            "name": model_instance.name,
            "surname": model_instance.surname,
            "last_name": model_instance.last_name,
            "contacts": ClientMapper.dump_contacts(model_instance.contacts),
        }

    @staticmethod
    def to_entity(model_instance: Client) -> ClientEntity:
        """Convert a Client (domain model) to ClientEntity (database entity)."""
        entity = ClientEntity(**ClientMapper.to_values(model_instance))
        # Unset values are left out so the engine assigns them
        if model_instance.id is not None:
            entity.id = model_instance.id
        if model_instance.created_at is not None:
            entity.created_at = model_instance.created_at
        if model_instance.updated_at is not None:
            entity.updated_at = model_instance.updated_at
        return entity

    @staticmethod
    def to_model(entity: ClientEntity) -> Client:
        """Convert a ClientEntity (database entity) to Client (domain model)."""
        return Client(
            id=entity.id,
            name=entity.name,
            surname=entity.surname,
            last_name=entity.last_name or "",
            contacts=ClientMapper.load_contacts(entity.contacts),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
