"""Shared fixtures for notification-templates tests."""

from __future__ import annotations

import copy
from datetime import datetime, timezone

import pytest

from notification_templates import InMemoryTemplateStore, Template, TemplateRenderer
from notification_templates.mongo import MongoConnectionManager, template_from_doc

PAYMENT_SUCCESS_SMS = {
    "_id": "payment-success-sms",
    "name": "Payment Success SMS",
    "channel": "SMS",
    "active": True,
    "params": [
        {
            "key": "amount",
            "type": "string",
            "required": True,
            "description": "Payment amount",
        },
        {
            "key": "transactionId",
            "type": "string",
            "required": True,
            "description": "Transaction ID",
        },
    ],
    "translations": {
        "en": {
            "subject": "Payment Successful",
            "content": "Payment of ${amount} was successful. "
            "Transaction ID: ${transactionId}",
        },
        "az": {
            "subject": "Ödəniş Uğurlu",
            "content": "${amount} məbləğində ödəniş uğurla həyata keçirildi. "
            "Tranzaksiya ID: ${transactionId}",
        },
        "ru": {
            "subject": "Платёж успешен",
            "content": "Платёж на сумму ${amount} был успешно выполнен. "
            "ID транзакции: ${transactionId}",
        },
    },
    "meta": {
        "createdBy": "system",
        "createdAt": datetime(2025, 1, 1, tzinfo=timezone.utc),
        "updatedAt": datetime(2025, 1, 1, tzinfo=timezone.utc),
    },
}

PAYMENT_PARAMS = {"amount": "50.00", "transactionId": "TX123"}


@pytest.fixture
def payment_doc() -> dict:
    """The payment-success-sms seed document as stored in MongoDB."""
    return copy.deepcopy(PAYMENT_SUCCESS_SMS)


@pytest.fixture
def payment_template(payment_doc) -> Template:
    return template_from_doc(payment_doc)


@pytest.fixture
def payment_params() -> dict:
    return dict(PAYMENT_PARAMS)


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def memory_store(payment_template) -> InMemoryTemplateStore:
    return InMemoryTemplateStore([payment_template])


@pytest.fixture
def mongo_connection():
    """MongoConnectionManager wired to a mongomock client."""
    from mongomock_motor import AsyncMongoMockClient

    connection = MongoConnectionManager(database="test_db")
    connection._client = AsyncMongoMockClient()
    yield connection
    connection._client = None
