"""MongoDB template store adapter (Motor)."""

from __future__ import annotations

from .connection import MongoConnectionManager
from .serialization import template_from_doc
from .store import MongoTemplateStore

__all__ = [
    "MongoConnectionManager",
    "MongoTemplateStore",
    "template_from_doc",
]
