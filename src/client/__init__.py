"""Typed async HTTP client for the CRM Clients API."""
from src.client.crm_client import CrmClient
from src.client.schemas import ClientRequest, ClientResponse, ContactSchema

__all__ = [
    "CrmClient",
    "ClientRequest",
    "ClientResponse",
    "ContactSchema",
]
