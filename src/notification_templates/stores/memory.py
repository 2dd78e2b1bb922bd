"""In-memory template store for tests and inline templates."""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import TemplateNotFoundError
from ..models import Template
from ..ports.store import ITemplateStore
from ..validation import ensure_valid_template


class InMemoryTemplateStore(ITemplateStore):
    """Simple dict-backed template store."""

    def __init__(
        self,
        templates: Iterable[Template] = (),
        *,
        validate_on_load: bool = True,
    ) -> None:
        self._validate_on_load = validate_on_load
        self._templates: dict[str, Template] = {}
        for template in templates:
            self.add(template)

    def add(self, template: Template) -> None:
        """Register *template*, replacing any template with the same id."""
        if self._validate_on_load:
            ensure_valid_template(template)
        self._templates[template.id] = template

    async def get(self, template_id: str) -> Template:
        try:
            return self._templates[template_id]
        except KeyError:
            raise TemplateNotFoundError(template_id) from None

    async def list_all(self) -> list[Template]:
        return sorted(self._templates.values(), key=lambda t: t.id)

    async def list_active(self) -> list[Template]:
        return [t for t in await self.list_all() if t.active]

    async def find_by_name(self, name: str) -> list[Template]:
        needle = name.casefold()
        return [t for t in await self.list_all() if needle in t.name.casefold()]
