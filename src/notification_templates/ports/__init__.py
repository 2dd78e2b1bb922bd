"""Ports implemented by template store adapters."""

from __future__ import annotations

from .store import ITemplateStore

__all__ = ["ITemplateStore"]
