"""MongoTemplateStore: read-only template lookup over a Motor collection."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from pymongo.errors import PyMongoError

from ..exceptions import (
    StoreUnavailableError,
    TemplateInvalidError,
    TemplateNotFoundError,
)
from ..ports.store import ITemplateStore
from ..validation import ensure_valid_template
from .serialization import template_from_doc

if TYPE_CHECKING:
    from ..models import Template
    from .connection import MongoConnectionManager

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "templates"


class MongoTemplateStore(ITemplateStore):
    """Template store backed by a MongoDB collection.

    The store never writes. Driver errors are raised as
    StoreUnavailableError with the original exception chained. List
    operations skip documents that fail validation; ``get`` raises for them.
    """

    def __init__(
        self,
        connection: MongoConnectionManager,
        *,
        collection: str = DEFAULT_COLLECTION,
        database: str | None = None,
        validate_on_load: bool = True,
    ) -> None:
        self._connection = connection
        self._collection_name = collection
        self._database = database
        self._validate_on_load = validate_on_load

    def _collection(self) -> Any:
        return self._connection.get_database(self._database).get_collection(
            self._collection_name
        )

    def _load(self, doc: dict[str, Any]) -> Template:
        template = template_from_doc(doc)
        if self._validate_on_load:
            ensure_valid_template(template)
        return template

    async def get(self, template_id: str) -> Template:
        try:
            doc = await self._collection().find_one({"_id": template_id})
        except PyMongoError as e:
            logger.error("Failed to load template %s: %s", template_id, e)
            raise StoreUnavailableError(str(e)) from e
        if doc is None:
            logger.debug("Template %s not found", template_id)
            raise TemplateNotFoundError(template_id)
        logger.debug("Found template %s", template_id)
        return self._load(doc)

    async def _find(self, query: dict[str, Any]) -> list[Template]:
        try:
            docs = [doc async for doc in self._collection().find(query)]
        except PyMongoError as e:
            logger.error("Template query %s failed: %s", query, e)
            raise StoreUnavailableError(str(e)) from e
        templates: list[Template] = []
        for doc in docs:
            try:
                templates.append(self._load(doc))
            except TemplateInvalidError as e:
                logger.warning("Skipping invalid template %s: %s", e.template_id, e)
        return sorted(templates, key=lambda t: t.id)

    async def list_all(self) -> list[Template]:
        logger.debug("Fetching all templates")
        return await self._find({})

    async def list_active(self) -> list[Template]:
        logger.debug("Fetching active templates")
        return await self._find({"active": True})

    async def find_by_name(self, name: str) -> list[Template]:
        logger.debug("Fetching templates by name: %s", name)
        return await self._find(
            {"name": {"$regex": re.escape(name), "$options": "i"}}
        )
