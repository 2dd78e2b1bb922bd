"""ValidationResult and template invariant checks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import TemplateInvalidError
from .models import Template
from .placeholders import find_placeholders


def default_errors_factory() -> dict[str, list[str]]:
    return {}


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"amount": ["is required"]})
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one, combining all errors."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for field_name, messages in other.errors.items():
            merged.setdefault(field_name, []).extend(messages)
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        """Add a single error for *field_name*."""
        self.errors.setdefault(field_name, []).append(message)

    def __bool__(self) -> bool:
        return self.is_valid


def validate_template(template: Template) -> ValidationResult:
    """Check that every placeholder in every translation is a declared param.

    Errors are keyed ``translations.<locale>.<subject|content>``.
    """
    declared = {spec.key for spec in template.params}
    result = ValidationResult.success()
    if not template.translations:
        result.add_error("translations", "at least one translation is required")
    for locale, translation in template.translations.items():
        for part in ("subject", "content"):
            for key in find_placeholders(getattr(translation, part)):
                if key not in declared:
                    result.add_error(
                        f"translations.{locale}.{part}",
                        f"placeholder {key!r} is not a declared parameter",
                    )
    return result


def ensure_valid_template(template: Template) -> Template:
    """Return *template* unchanged, or raise if it violates its invariants."""
    result = validate_template(template)
    if not result:
        raise TemplateInvalidError(template.id, result.errors)
    return template
