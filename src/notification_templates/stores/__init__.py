"""Template store implementations."""

from __future__ import annotations

from .memory import InMemoryTemplateStore

__all__ = ["InMemoryTemplateStore"]
