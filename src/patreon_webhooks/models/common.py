"""Shared JSON:API building blocks: identifiers, relationship stubs, resource base."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints, field_validator


def _coerce_resource_id(value: Any) -> Any:
    """Normalize an identifier sent as a JSON number or a JSON string.

    Older payloads carry numeric ids, newer ones strings. Both map to the
    string form; anything else is left for the ``str`` validator to reject.
    """
    if isinstance(value, bool):
        raise ValueError("resource id must be a string or an integer")
    if isinstance(value, int):
        return str(value)
    return value


ResourceId = Annotated[
    str,
    StringConstraints(min_length=1),
    BeforeValidator(_coerce_resource_id),
]


class ResourceIdentifier(BaseModel):
    """Foreign-key stub pointing at another resource. Never dereferenced here."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: ResourceId
    type: str


class RelatedLinks(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    related: str | None = None


class ToOneRelationship(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    data: ResourceIdentifier | None = None
    links: RelatedLinks | None = None


class ToManyRelationship(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    data: tuple[ResourceIdentifier, ...] = ()
    links: RelatedLinks | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def ids(self) -> list[str]:
        return [ref.id for ref in self.data]


class Attributes(BaseModel):
    """Base for attribute blocks.

    Patreon only sends the fields a client asked for, and any of them may be
    ``null``, so every attribute is optional and absent means ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")


class Resource(BaseModel):
    """A JSON:API resource object: ``{"id", "type", "attributes", "relationships"}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: ResourceId
    type: str
