from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class User:
    """A user record.  ``id`` is assigned by the creator and never changes."""

    id: UUID
    full_name: str
