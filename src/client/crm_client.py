"""CRM HTTP Client for consuming the CRM Clients API."""
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import ClientRequest, ClientResponse

CLIENTS_PATH = "/api/clients"


class CrmClient:
    """HTTP client for interacting with the CRM Clients API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the CRM client.

        Args:
            base_url: Base URL of the CRM API (e.g., "http://localhost:3000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def list_clients(self, search: Optional[str] = None) -> list[ClientResponse]:
        """
        List clients.

        Args:
            search: Optional substring matched against name, surname and last name

        Returns:
            List of client responses

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        params = {"search": search} if search else None
        response: Response = await self.client.get(f"{CLIENTS_PATH}/", params=params)
        response.raise_for_status()
        return [ClientResponse.model_validate(item) for item in response.json()]

    async def create_client(self, request: ClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 422 on invalid data)
        """
        response: Response = await self.client.post(
            f"{CLIENTS_PATH}/",
            json=request.model_dump(mode="json", by_alias=True)
        )
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def get_client(self, client_id: int) -> ClientResponse:
        """
        Get a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.get(f"{CLIENTS_PATH}/{client_id}")
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def update_client(self, client_id: int, request: ClientRequest) -> ClientResponse:
        """
        Replace the mutable fields of a client.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if not found, 422 on invalid data)
        """
        response: Response = await self.client.patch(
            f"{CLIENTS_PATH}/{client_id}",
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def delete_client(self, client_id: int) -> None:
        """
        Delete a client by ID.

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 404 if not found)
        """
        response: Response = await self.client.delete(f"{CLIENTS_PATH}/{client_id}")
        response.raise_for_status()
