"""Domain models for studio clients and photographers."""

from dataclasses import dataclass
from uuid import uuid4


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


@dataclass(frozen=True)
class PersonInfo:
    """Identity and contact details shared by clients and photographers."""

    id: str
    name: str
    phone: str


@dataclass
class Client:
    """A studio client.

    ``is_regular`` only ever moves from False to True; it is set through
    ``mark_regular`` by the loyalty rule or restored from storage.
    """

    person: PersonInfo
    email: str
    is_regular: bool = False

    @classmethod
    def create(
        cls, name: str, phone: str, email: str, is_regular: bool = False
    ) -> "Client":
        """Create a client with a generated id."""
        return cls(
            person=PersonInfo(id=new_id(), name=name, phone=phone),
            email=email,
            is_regular=is_regular,
        )

    @property
    def id(self) -> str:
        return self.person.id

    @property
    def name(self) -> str:
        return self.person.name

    @property
    def phone(self) -> str:
        return self.person.phone

    def mark_regular(self) -> None:
        """Grant loyalty status."""
        self.is_regular = True


@dataclass
class Photographer:
    """A photographer who can be assigned to orders."""

    person: PersonInfo
    specialization: str

    @classmethod
    def create(cls, name: str, phone: str, specialization: str) -> "Photographer":
        """Create a photographer with a generated id."""
        return cls(
            person=PersonInfo(id=new_id(), name=name, phone=phone),
            specialization=specialization,
        )

    @property
    def id(self) -> str:
        return self.person.id

    @property
    def name(self) -> str:
        return self.person.name

    @property
    def phone(self) -> str:
        return self.person.phone
