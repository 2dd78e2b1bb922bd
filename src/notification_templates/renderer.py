"""Template renderer: parameter validation, locale selection, substitution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .config import RendererConfig
from .exceptions import (
    MissingParamError,
    NoTranslationError,
    TemplateInactiveError,
    TypeMismatchError,
)
from .models import RenderResult, Template
from .placeholders import substitute
from .validation import ValidationResult

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """
    Renders a loaded template into subject and content for one locale.

    Rendering is a pure function of the template, the locale and the
    parameters; a single instance can be shared across threads.
    """

    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig()

    def render(
        self,
        template: Template,
        locale: str | None,
        params: Mapping[str, Any],
    ) -> RenderResult:
        """Render *template* for *locale*.

        Raises:
            TemplateInactiveError: the template is switched off.
            MissingParamError: a required parameter is absent.
            TypeMismatchError: a value disagrees with its declared type.
            NoTranslationError: neither *locale* nor the default is available.
            UnresolvedPlaceholderError: an undeclared placeholder has no value.
        """
        if not template.active:
            logger.warning("Refusing to render inactive template %s", template.id)
            raise TemplateInactiveError(template.id)

        self.validate_params(template, params)
        used = self.resolve_locale(template, locale)
        result = self._render_translation(template, used, params)
        logger.debug(
            "Rendered template %s in %s (requested %s)", template.id, used, locale
        )
        return result

    def render_all(
        self,
        template: Template,
        params: Mapping[str, Any],
    ) -> dict[str, RenderResult]:
        """Render every translation of *template*, keyed by locale."""
        if not template.active:
            raise TemplateInactiveError(template.id)
        self.validate_params(template, params)
        if not template.translations:
            raise NoTranslationError(template.id, None, self.config.default_locale)
        rendered = {
            locale: self._render_translation(template, locale, params)
            for locale in template.translations
        }
        logger.debug(
            "Rendered template %s in %d languages", template.id, len(rendered)
        )
        return rendered

    def validate_params(self, template: Template, params: Mapping[str, Any]) -> None:
        """Raise on the first parameter contract violation.

        Required keys are checked before value types, both in declaration
        order. Undeclared keys are ignored.
        """
        for spec in template.params:
            if spec.required and params.get(spec.key) is None:
                logger.warning(
                    "Required parameter '%s' missing for template %s",
                    spec.key,
                    template.id,
                )
                raise MissingParamError(spec.key)
        for spec in template.params:
            value = params.get(spec.key)
            if value is not None and not spec.type.accepts(value):
                raise TypeMismatchError(spec.key, spec.type.value, value)

    def check_params(
        self,
        template: Template,
        params: Mapping[str, Any],
    ) -> ValidationResult:
        """Collect every parameter problem without raising."""
        result = ValidationResult.success()
        for spec in template.params:
            value = params.get(spec.key)
            if value is None:
                if spec.required:
                    result.add_error(spec.key, "is required")
            elif not spec.type.accepts(value):
                result.add_error(
                    spec.key,
                    f"expected {spec.type.value}, got {type(value).__name__}",
                )
        return result

    def resolve_locale(self, template: Template, locale: str | None) -> str:
        """Pick the translation locale to use for a request."""
        translations = template.translations
        if locale and locale in translations:
            return locale
        if locale and self.config.match_language_subtag:
            language = locale.replace("_", "-").split("-", 1)[0]
            if language in translations:
                return language
        default = self.config.default_locale
        if default in translations:
            if locale:
                logger.debug(
                    "Template %s has no %s translation, falling back to %s",
                    template.id,
                    locale,
                    default,
                )
            return default
        raise NoTranslationError(template.id, locale, default)

    def _render_translation(
        self,
        template: Template,
        locale: str,
        params: Mapping[str, Any],
    ) -> RenderResult:
        translation = template.translations[locale]
        declared = {spec.key for spec in template.params}
        return RenderResult(
            template_id=template.id,
            channel=template.channel,
            locale=locale,
            subject=substitute(translation.subject, params, declared),
            content=substitute(translation.content, params, declared),
        )
