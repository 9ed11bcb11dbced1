from typing import Optional
from sqlalchemy import select, update, delete, func, or_

from src.app.core.domain.models import Client
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.client_entity import ClientEntity
from src.app.infrastructure.mappers.client_mapper import ClientMapper

# Signed 64-bit range of the id column; drivers reject anything wider
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def is_storable_id(client_id: int) -> bool:
    return MIN_ID <= client_id <= MAX_ID


class ClientRepository(BaseRepository[ClientEntity, Client]):
    """Repository for Client operations. Each method runs in its own transaction."""

    def __init__(self, db: Database, mapper: ClientMapper):
        super().__init__(db, mapper)

    async def list_clients(self, search: Optional[str] = None) -> list[Client]:
        """
        List clients, optionally filtered by a substring of name, surname or last name.

        Matching uses the engine's LIKE operator, so case sensitivity follows the
        engine (case-insensitive for ASCII on SQLite, case-sensitive on PostgreSQL).

        Args:
            search: Substring to look for. Empty or None returns every client.

        Returns:
            List of clients in insertion order
        """
        stmt = select(ClientEntity).order_by(ClientEntity.id)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    ClientEntity.name.like(pattern),
                    ClientEntity.surname.like(pattern),
                    ClientEntity.last_name.like(pattern),
                )
            )
        return await self.find_all(stmt)

    async def get_by_id(self, client_id: int) -> Optional[Client]:
        """Get a client by ID."""
        if not is_storable_id(client_id):
            return None
        return await self.find_one(
            select(ClientEntity).where(ClientEntity.id == client_id)
        )

    async def add(self, client: Client) -> Client:
        """Insert a client; storage assigns the id and both timestamps."""
        return await self.insert(client)

    async def update(self, client_id: int, client: Client) -> Optional[Client]:
        """
        Overwrite the mutable fields of a client and refresh its update timestamp.

        Returns:
            The stored client, or None when no row has this ID
        """
        if not is_storable_id(client_id):
            return None
        stmt = (
            update(ClientEntity)
            .where(ClientEntity.id == client_id)
            .values(**self.mapper.to_values(client), updated_at=func.now())
            .returning(ClientEntity)
        )
        return await self.modify_returning(stmt)

    async def delete(self, client_id: int) -> bool:
        """
        Delete a client.

        Returns:
            True if a row was removed, False when no row has this ID
        """
        if not is_storable_id(client_id):
            return False
        stmt = (
            delete(ClientEntity)
            .where(ClientEntity.id == client_id)
            .execution_options(synchronize_session=False)
        )
        return await self.execute_counting(stmt) > 0
