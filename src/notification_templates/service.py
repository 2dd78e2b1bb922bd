"""TemplateRenderingService: store lookup followed by rendering."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .renderer import TemplateRenderer

if TYPE_CHECKING:
    from .models import RenderRequest, RenderResult
    from .ports.store import ITemplateStore
    from .validation import ValidationResult

logger = logging.getLogger(__name__)


class TemplateRenderingService:
    """
    Loads templates through an :class:`ITemplateStore` and renders them.

    Errors from the store and the renderer propagate unchanged; nothing is
    retried here.

    Example:
        ```python
        service = TemplateRenderingService(
            MongoTemplateStore(connection),
            TemplateRenderer(RendererConfig(default_locale="en")),
        )
        result = await service.render(
            RenderRequest(
                template_id="payment-success-sms",
                locale="az",
                params={"amount": "50.00", "transactionId": "TX123"},
            )
        )
        ```
    """

    def __init__(
        self,
        store: ITemplateStore,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._store = store
        self._renderer = renderer or TemplateRenderer()

    @property
    def renderer(self) -> TemplateRenderer:
        return self._renderer

    async def render(self, request: RenderRequest) -> RenderResult:
        """Render one template for the requested locale."""
        logger.debug(
            "Rendering template %s for locale %s", request.template_id, request.locale
        )
        template = await self._store.get(request.template_id)
        return self._renderer.render(template, request.locale, request.params)

    async def render_all(
        self,
        template_id: str,
        params: Mapping[str, Any],
    ) -> dict[str, RenderResult]:
        """Render a template in every language it has."""
        template = await self._store.get(template_id)
        return self._renderer.render_all(template, params)

    async def check_params(
        self,
        template_id: str,
        params: Mapping[str, Any],
    ) -> ValidationResult:
        """Report parameter problems for a template without raising."""
        template = await self._store.get(template_id)
        return self._renderer.check_params(template, params)
