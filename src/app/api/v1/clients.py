from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from dependency_injector.wiring import Provide, inject

from src.app.config import Settings
from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.client.schemas import ClientResponse
from src.app.api.dependencies import read_json_body
from src.app.api.mappers import to_client_response

router = APIRouter(tags=["clients"])


@router.get("/", response_model=list[ClientResponse])
@router.get("", response_model=list[ClientResponse], include_in_schema=False)
@inject
async def list_clients(
    search: Optional[str] = None,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> list[ClientResponse]:
    """List clients, optionally filtered by a substring of name, surname or last name."""
    clients = await service.list_clients(search)
    return [to_client_response(client) for client in clients]


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@inject
async def create_client(
    request: Request,
    response: Response,
    service: ClientService = Depends(Provide[Container.client_service]),
    config: Settings = Depends(Provide[Container.config]),
) -> ClientResponse:
    """
    Create a new client.

    The Location header of the 201 response points at the created client
    and is exposed to browsers through CORS.
    """
    data = await read_json_body(request, config.api.max_body_bytes)
    client = await service.create_client(data)
    response.headers["Location"] = f"{config.api.prefix}/{client.id}"
    response.headers["Access-Control-Expose-Headers"] = "Location"
    return to_client_response(client)


@router.get("/{client_id}", response_model=ClientResponse)
@inject
async def get_client(
    client_id: str,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> ClientResponse:
    """Get a client by ID."""
    client = await service.get_client(client_id)
    return to_client_response(client)


@router.patch("/{client_id}", response_model=ClientResponse)
@inject
async def update_client(
    client_id: str,
    request: Request,
    service: ClientService = Depends(Provide[Container.client_service]),
    config: Settings = Depends(Provide[Container.config]),
) -> ClientResponse:
    """Replace every mutable field of a client."""
    data = await read_json_body(request, config.api.max_body_bytes)
    client = await service.update_client(client_id, data)
    return to_client_response(client)


@router.delete("/{client_id}")
@inject
async def delete_client(
    client_id: str,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> dict:
    """Delete a client by ID."""
    await service.delete_client(client_id)
    return {}
