"""Exception hierarchy for template lookup and rendering."""

from __future__ import annotations

from typing import Any


class TemplatingError(Exception):
    """Root exception for the notification-templates package."""

    code: str = "TEMPLATE_000"
    retryable: bool = False


class TemplateNotFoundError(TemplatingError):
    """Raised when no template document matches the requested id."""

    code = "TEMPLATE_001"

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template with id={template_id!r} not found")


class TemplateInvalidError(TemplatingError):
    """Raised when a stored template violates the data model.

    Carries structured errors: ``{field: [messages]}``.
    """

    code = "TEMPLATE_002"

    def __init__(
        self,
        template_id: str | None,
        errors: dict[str, list[str]] | str | None = None,
    ) -> None:
        self.template_id = template_id
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(f"Template {template_id!r} is invalid: {self.errors}")


class StoreUnavailableError(TemplatingError):
    """Raised when the template store cannot be reached.

    The only error a caller may reasonably retry.
    """

    code = "STORE_001"
    retryable = True


class MongoConnectionError(StoreUnavailableError):
    """Raised when connection to MongoDB fails."""


class RenderError(TemplatingError):
    """Base class for failures of a single render attempt."""


class TemplateInactiveError(RenderError):
    """Raised when rendering a template whose ``active`` flag is false."""

    code = "TEMPLATE_003"

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template {template_id!r} is inactive")


class ParamError(RenderError):
    """Base class for parameter contract violations."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


class MissingParamError(ParamError):
    """Raised when a required parameter is absent."""

    code = "PARAM_001"

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Required parameter {key!r} is missing")


class TypeMismatchError(ParamError):
    """Raised when a parameter value disagrees with its declared type."""

    code = "PARAM_002"

    def __init__(self, key: str, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(
            key,
            f"Parameter {key!r} expects {expected}, got {self.actual}",
        )


class NoTranslationError(RenderError):
    """Raised when neither the requested nor the default locale is available."""

    code = "LOCALE_001"

    def __init__(
        self,
        template_id: str,
        locale: str | None,
        default_locale: str,
    ) -> None:
        self.template_id = template_id
        self.locale = locale
        self.default_locale = default_locale
        super().__init__(
            f"Template {template_id!r} has no translation for {locale!r} "
            f"(default {default_locale!r})"
        )


class UnresolvedPlaceholderError(RenderError):
    """Raised when a placeholder has no parameter value to substitute."""

    code = "RENDER_001"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Placeholder ${{{key}}} has no value")
