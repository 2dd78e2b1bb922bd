"""Template data model mapped from the stored document shape."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .placeholders import is_valid_key


class Channel(str, Enum):
    """Supported notification channels."""

    SMS = "SMS"
    EMAIL = "EMAIL"
    PUSH = "PUSH"
    WEBHOOK = "WEBHOOK"


class ParamType(str, Enum):
    """Declared parameter value types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def accepts(self, value: Any) -> bool:
        """Return True if *value* satisfies this declared type."""
        if self is ParamType.BOOLEAN:
            return isinstance(value, bool)
        if self is ParamType.NUMBER:
            # bool is an int subclass; a flag is not a number here
            return isinstance(value, (int, float, Decimal)) and not isinstance(
                value, bool
            )
        return isinstance(value, str)


class _DocumentModel(BaseModel):
    """Frozen model that reads camelCase document keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ParamSpec(_DocumentModel):
    """Declared template parameter."""

    key: str
    type: ParamType = ParamType.STRING
    required: bool = False
    description: str | None = None

    @field_validator("key")
    @classmethod
    def _key_is_placeholder_token(cls, value: str) -> str:
        if not is_valid_key(value):
            raise ValueError(f"{value!r} is not a valid placeholder key")
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class Translation(_DocumentModel):
    """Subject and content for one locale."""

    subject: str = ""
    content: str


class TemplateMeta(_DocumentModel):
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Template(_DocumentModel):
    """Notification template.

    ``params`` keeps declaration order. ``translations`` is keyed by locale
    code. Instances are immutable; the renderer never mutates them.
    """

    id: str = Field(min_length=1)
    name: str
    channel: Channel
    active: bool = True
    params: tuple[ParamSpec, ...] = ()
    translations: dict[str, Translation] = Field(default_factory=dict)
    meta: TemplateMeta | None = None

    @field_validator("channel", mode="before")
    @classmethod
    def _normalise_channel(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _param_keys_unique(self) -> Template:
        seen: set[str] = set()
        for spec in self.params:
            if spec.key in seen:
                raise ValueError(f"duplicate parameter key {spec.key!r}")
            seen.add(spec.key)
        return self

    @property
    def locales(self) -> list[str]:
        return list(self.translations)

    @property
    def required_keys(self) -> list[str]:
        return [spec.key for spec in self.params if spec.required]

    def param(self, key: str) -> ParamSpec | None:
        """Return the declared spec for *key*, or None if undeclared."""
        for spec in self.params:
            if spec.key == key:
                return spec
        return None


class RenderRequest(BaseModel):
    """Caller's request to render one template."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    locale: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)


class RenderResult(BaseModel):
    """Rendered message text and the locale actually used."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    channel: Channel
    locale: str
    subject: str
    content: str
