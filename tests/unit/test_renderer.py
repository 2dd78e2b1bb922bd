"""Tests for TemplateRenderer."""

import pytest

from notification_templates.config import RendererConfig
from notification_templates.exceptions import (
    MissingParamError,
    NoTranslationError,
    TemplateInactiveError,
    TypeMismatchError,
    UnresolvedPlaceholderError,
)
from notification_templates.models import Channel, Template
from notification_templates.renderer import TemplateRenderer
from notification_templates.validation import validate_template


@pytest.fixture
def order_template():
    """Template with mixed parameter types and an optional parameter."""
    return Template(
        id="order-shipped-email",
        name="Order Shipped",
        channel="EMAIL",
        params=[
            {"key": "orderId", "type": "string", "required": True},
            {"key": "items", "type": "number", "required": True},
            {"key": "express", "type": "boolean"},
        ],
        translations={
            "en": {
                "subject": "Order ${orderId} shipped",
                "content": "${items} items on the way. Express: ${express}",
            },
            "de": {
                "subject": "Bestellung ${orderId} versandt",
                "content": "${items} Artikel unterwegs.",
            },
        },
    )


def test_render_requested_locale(renderer, payment_template, payment_params):
    result = renderer.render(payment_template, "ru", payment_params)

    assert result.locale == "ru"
    assert result.subject == "Платёж успешен"
    assert result.content == (
        "Платёж на сумму 50.00 был успешно выполнен. ID транзакции: TX123"
    )
    assert result.template_id == "payment-success-sms"
    assert result.channel is Channel.SMS


def test_render_substitution_example(renderer, payment_template, payment_params):
    result = renderer.render(payment_template, "en", payment_params)

    assert result.subject == "Payment Successful"
    assert result.content == "Payment of 50.00 was successful. Transaction ID: TX123"


def test_render_is_idempotent(renderer, payment_template, payment_params):
    first = renderer.render(payment_template, "az", payment_params)
    second = renderer.render(payment_template, "az", payment_params)
    assert first == second


def test_fallback_to_default_locale(renderer, payment_template, payment_params):
    result = renderer.render(payment_template, "fr", payment_params)
    assert result.locale == "en"
    assert result.subject == "Payment Successful"


def test_no_locale_uses_default(renderer, payment_template, payment_params):
    assert renderer.render(payment_template, None, payment_params).locale == "en"


def test_configured_default_locale(payment_template, payment_params):
    renderer = TemplateRenderer(RendererConfig(default_locale="az"))
    result = renderer.render(payment_template, "fr", payment_params)
    assert result.locale == "az"


def test_no_translation_when_default_absent(payment_template, payment_params):
    renderer = TemplateRenderer(RendererConfig(default_locale="de"))

    with pytest.raises(NoTranslationError) as exc_info:
        renderer.render(payment_template, "fr", payment_params)

    assert exc_info.value.locale == "fr"
    assert exc_info.value.default_locale == "de"
    assert exc_info.value.template_id == "payment-success-sms"


def test_region_locale_is_not_matched_by_default(
    renderer, payment_template, payment_params
):
    assert renderer.render(payment_template, "ru-RU", payment_params).locale == "en"


def test_language_subtag_matching(payment_template, payment_params):
    renderer = TemplateRenderer(RendererConfig(match_language_subtag=True))

    assert renderer.render(payment_template, "ru-RU", payment_params).locale == "ru"
    assert renderer.render(payment_template, "az_AZ", payment_params).locale == "az"
    assert renderer.render(payment_template, "fr-FR", payment_params).locale == "en"


def test_missing_required_param(renderer, payment_template):
    with pytest.raises(MissingParamError) as exc_info:
        renderer.render(payment_template, "en", {"transactionId": "TX123"})
    assert exc_info.value.key == "amount"


def test_none_required_param_is_missing(renderer, payment_template):
    with pytest.raises(MissingParamError) as exc_info:
        renderer.render(
            payment_template, "en", {"amount": None, "transactionId": "TX123"}
        )
    assert exc_info.value.key == "amount"


def test_missing_checked_before_types(renderer, order_template):
    with pytest.raises(MissingParamError) as exc_info:
        renderer.render(order_template, "en", {"orderId": 7})
    assert exc_info.value.key == "items"


def test_type_mismatch(renderer, payment_template):
    with pytest.raises(TypeMismatchError) as exc_info:
        renderer.render(payment_template, "en", {"amount": 50, "transactionId": "TX"})

    error = exc_info.value
    assert error.key == "amount"
    assert error.expected == "string"
    assert error.actual == "int"


def test_bool_is_not_a_number(renderer, order_template):
    with pytest.raises(TypeMismatchError) as exc_info:
        renderer.render(order_template, "en", {"orderId": "A1", "items": True})
    assert exc_info.value.key == "items"


def test_optional_param_type_checked_when_supplied(renderer, order_template):
    with pytest.raises(TypeMismatchError) as exc_info:
        renderer.render(
            order_template, "de", {"orderId": "A1", "items": 2, "express": "yes"}
        )
    assert exc_info.value.key == "express"


def test_mixed_types_render(renderer, order_template):
    result = renderer.render(
        order_template, "en", {"orderId": "A1", "items": 3, "express": False}
    )
    assert result.subject == "Order A1 shipped"
    assert result.content == "3 items on the way. Express: false"


def test_unknown_extra_param_ignored(renderer, payment_template, payment_params):
    params = {**payment_params, "currency": object()}
    result = renderer.render(payment_template, "en", params)
    assert result.content == "Payment of 50.00 was successful. Transaction ID: TX123"


def test_optional_param_referenced_but_absent_keeps_token(
    renderer, order_template
):
    result = renderer.render(order_template, "en", {"orderId": "A1", "items": 3})
    assert result.content == "3 items on the way. Express: ${express}"


def test_required_params_alone_never_raise_param_errors(renderer):
    template = Template(
        id="receipt-sms",
        name="Receipt",
        channel="SMS",
        params=[{"key": "a", "required": True}, {"key": "note"}],
        translations={
            "en": {"subject": "${note}", "content": "A=${a} ${note}"},
            "az": {"subject": "", "content": "A=${a}"},
        },
    )
    assert validate_template(template).is_valid

    for locale in ("en", "az", "fr", None):
        result = renderer.render(template, locale, {"a": "1"})
        assert result.content.startswith("A=1")

    assert renderer.render(template, "en", {"a": "1"}).content == "A=1 ${note}"
    assert set(renderer.render_all(template, {"a": "1"})) == {"en", "az"}


def test_optional_param_not_referenced_in_locale(renderer, order_template):
    result = renderer.render(order_template, "de", {"orderId": "A1", "items": 3})
    assert result.content == "3 Artikel unterwegs."


def test_undeclared_placeholder_is_unresolved(renderer):
    template = Template(
        id="broken",
        name="Broken",
        channel="SMS",
        translations={"en": {"subject": "", "content": "Code ${code}"}},
    )
    with pytest.raises(UnresolvedPlaceholderError) as exc_info:
        renderer.render(template, "en", {})
    assert exc_info.value.key == "code"


def test_inactive_template_rejected_even_with_valid_params(
    renderer, payment_template, payment_params
):
    inactive = payment_template.model_copy(update={"active": False})

    with pytest.raises(TemplateInactiveError) as exc_info:
        renderer.render(inactive, "en", payment_params)
    assert exc_info.value.template_id == "payment-success-sms"

    with pytest.raises(TemplateInactiveError):
        renderer.render_all(inactive, payment_params)


def test_render_all(renderer, payment_template, payment_params):
    rendered = renderer.render_all(payment_template, payment_params)

    assert list(rendered) == ["en", "az", "ru"]
    assert rendered["az"].content.startswith("50.00 məbləğində")
    assert all(result.locale == locale for locale, result in rendered.items())


def test_render_all_validates_params(renderer, payment_template):
    with pytest.raises(MissingParamError):
        renderer.render_all(payment_template, {})


def test_render_all_without_translations(renderer):
    template = Template(id="empty", name="Empty", channel="PUSH")
    with pytest.raises(NoTranslationError):
        renderer.render_all(template, {})


def test_check_params_collects_all_problems(renderer, order_template):
    result = renderer.check_params(order_template, {"items": "3", "express": 1})

    assert not result.is_valid
    assert result.errors == {
        "orderId": ["is required"],
        "items": ["expected number, got str"],
        "express": ["expected boolean, got int"],
    }


def test_check_params_valid(renderer, payment_template, payment_params):
    assert renderer.check_params(payment_template, payment_params).is_valid


def test_renderer_config_rejects_empty_default():
    with pytest.raises(ValueError):
        RendererConfig(default_locale="")
