"""BSON template document -> Template model."""

from __future__ import annotations

from typing import Any

from bson import Decimal128
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import TemplateInvalidError
from ..models import Template


def _deserialize_value(value: Any) -> Any:
    """Convert BSON types back to Python types."""
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, dict):
        return {k: _deserialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_deserialize_value(v) for v in value]
    return value


def template_from_doc(doc: dict[str, Any]) -> Template:
    """Map a stored template document to a :class:`Template`.

    ``_id`` becomes ``id``; an ObjectId is stringified. Pydantic errors are
    converted to :class:`TemplateInvalidError` with ``{field: [messages]}``.
    """
    if not isinstance(doc, dict):
        raise TemplateInvalidError(None, "Document must be a dict")
    data = dict(doc)
    if "_id" in data:
        raw_id = data.pop("_id")
        data["id"] = raw_id if isinstance(raw_id, str) else str(raw_id)
    data = _deserialize_value(data)
    try:
        return Template.model_validate(data)
    except PydanticValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
            errors.setdefault(loc or "__root__", []).append(
                error.get("msg", "validation error")
            )
        raise TemplateInvalidError(data.get("id"), errors) from exc
