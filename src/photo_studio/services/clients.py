"""Client-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from photo_studio.domain.people import Client
from photo_studio.errors import DuplicateClientError


class ClientRepository(Protocol):
    """Persistence interface for clients."""

    def add_client(self, client: Client) -> None:
        """Store a new client."""

    def find_client_by_phone(self, phone: str) -> Client | None:
        """Return the first client with exactly this phone, if present."""

    def client_exists(self, phone: str, email: str) -> bool:
        """Return True if a client matches the phone or the email."""

    def get_client(self, client_id: str) -> Client | None:
        """Return a client by id, if present."""

    def clients(self) -> tuple[Client, ...]:
        """Return all clients in insertion order."""


@dataclass
class ClientService:
    """Application service for client registration."""

    repository: ClientRepository

    def register(self, name: str, phone: str, email: str) -> Client:
        """Create a non-regular client unless one already matches."""
        if self.repository.client_exists(phone, email):
            raise DuplicateClientError(phone, email)
        client = Client.create(name=name, phone=phone, email=email)
        self.repository.add_client(client)
        return client

    def get_or_create(self, name: str, phone: str, email: str) -> Client:
        """Return the client with this phone, creating one if needed."""
        existing = self.repository.find_client_by_phone(phone)
        if existing is not None:
            return existing
        client = Client.create(name=name, phone=phone, email=email)
        self.repository.add_client(client)
        return client

    def find_by_phone(self, phone: str) -> Client | None:
        return self.repository.find_client_by_phone(phone)

    def list_clients(self) -> list[Client]:
        return list(self.repository.clients())
