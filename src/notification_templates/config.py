"""Renderer configuration supplied by the embedding application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RendererConfig:
    """Renderer configuration.

    Attributes:
        default_locale: Locale used when the requested one has no translation.
        match_language_subtag: Try the primary language subtag of the
            requested locale (``"ru-RU"`` -> ``"ru"``) before the default.
    """

    default_locale: str = "en"
    match_language_subtag: bool = False

    def __post_init__(self) -> None:
        if not self.default_locale:
            raise ValueError("default_locale must be a non-empty locale code")
