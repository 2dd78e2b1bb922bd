"""Notification template lookup and rendering.

Loads templates from a store adapter, validates parameters against the
template's declared contract, selects a translation with default-locale
fallback and substitutes ``${key}`` placeholders.
"""

from __future__ import annotations

from .config import RendererConfig
from .exceptions import (
    MissingParamError,
    MongoConnectionError,
    NoTranslationError,
    ParamError,
    RenderError,
    StoreUnavailableError,
    TemplateInactiveError,
    TemplateInvalidError,
    TemplateNotFoundError,
    TemplatingError,
    TypeMismatchError,
    UnresolvedPlaceholderError,
)
from .models import (
    Channel,
    ParamSpec,
    ParamType,
    RenderRequest,
    RenderResult,
    Template,
    TemplateMeta,
    Translation,
)
from .ports.store import ITemplateStore
from .renderer import TemplateRenderer
from .service import TemplateRenderingService
from .stores.memory import InMemoryTemplateStore
from .validation import ValidationResult, ensure_valid_template, validate_template

__all__ = [
    # Models
    "Channel",
    "ParamSpec",
    "ParamType",
    "RenderRequest",
    "RenderResult",
    "Template",
    "TemplateMeta",
    "Translation",
    # Rendering
    "RendererConfig",
    "TemplateRenderer",
    "TemplateRenderingService",
    # Stores
    "ITemplateStore",
    "InMemoryTemplateStore",
    # Validation
    "ValidationResult",
    "ensure_valid_template",
    "validate_template",
    # Exceptions
    "TemplatingError",
    "TemplateNotFoundError",
    "TemplateInvalidError",
    "TemplateInactiveError",
    "StoreUnavailableError",
    "MongoConnectionError",
    "RenderError",
    "ParamError",
    "MissingParamError",
    "TypeMismatchError",
    "NoTranslationError",
    "UnresolvedPlaceholderError",
]
