"""Template store port."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import Template


@runtime_checkable
class ITemplateStore(Protocol):
    """
    Protocol for read-only template lookup.

    Implementations: InMemoryTemplateStore, MongoTemplateStore.
    Transport failures surface as StoreUnavailableError and are never
    retried by the store itself.
    """

    async def get(self, template_id: str) -> Template:
        """Load a template by id; raises TemplateNotFoundError if absent."""
        ...

    async def list_all(self) -> list[Template]:
        """Return every template, sorted by id."""
        ...

    async def list_active(self) -> list[Template]:
        """Return templates whose ``active`` flag is set, sorted by id."""
        ...

    async def find_by_name(self, name: str) -> list[Template]:
        """Case-insensitive partial match on template name, sorted by id."""
        ...
