import logging
import re
from typing import Any, Optional

from src.app.core.domain.models import Client
from src.app.core.services.client_validator import validate_client
from src.app.infrastructure.client_repository import ClientRepository
from src.shared.exceptions import EntityNotFound

logger = logging.getLogger(__name__)

_INTEGER_ID = re.compile(r"-?[0-9]+")


def parse_client_id(client_id: int | str) -> Optional[int]:
    """Read an id taken from a URL path. Text that is not a base-10 integer names no client."""
    if isinstance(client_id, int):
        return client_id
    if not _INTEGER_ID.fullmatch(client_id):
        return None
    return int(client_id)


class ClientService:
    """Service for handling Client business logic."""

    def __init__(self, repository: ClientRepository):
        self.repository = repository

    async def list_clients(self, search: Optional[str] = None) -> list[Client]:
        """List all clients, or those whose names contain the search term."""
        return await self.repository.list_clients(search)

    async def get_client(self, client_id: int | str) -> Client:
        """Get a client by ID."""
        parsed_id = parse_client_id(client_id)
        client = await self.repository.get_by_id(parsed_id) if parsed_id is not None else None
        if not client:
            raise EntityNotFound("Client", client_id)
        return client

    async def create_client(self, data: Any) -> Client:
        """
        Validate raw input and persist it as a new client.

        Raises:
            ValidationFailed: If the input is not a valid client
        """
        client = await self.repository.add(validate_client(data))
        logger.info("Created client %s", client.id)
        return client

    async def update_client(self, client_id: int | str, data: Any) -> Client:
        """
        Validate raw input and overwrite the client's mutable fields with it.

        Validation runs before the lookup, so invalid input is reported even
        for an unknown ID.

        Raises:
            ValidationFailed: If the input is not a valid client
            EntityNotFound: If no client has this ID
        """
        client = validate_client(data)
        parsed_id = parse_client_id(client_id)
        updated = await self.repository.update(parsed_id, client) if parsed_id is not None else None
        if not updated:
            raise EntityNotFound("Client", client_id)
        logger.info("Updated client %s", client_id)
        return updated

    async def delete_client(self, client_id: int | str) -> None:
        """Delete a client by ID."""
        parsed_id = parse_client_id(client_id)
        if parsed_id is None or not await self.repository.delete(parsed_id):
            raise EntityNotFound("Client", client_id)
        logger.info("Deleted client %s", client_id)
