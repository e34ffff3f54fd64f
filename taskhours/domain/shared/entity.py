"""Identity base class for domain entities."""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Entity(BaseModel):
    """An object defined by its identity rather than its attributes.

    The id is assigned once at construction and never changes. Two
    entities are equal when they are of the same type and share an id,
    whatever their other fields say.
    """

    id: UUID = Field(default_factory=uuid4, frozen=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))
