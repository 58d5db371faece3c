"""Shared pytest fixtures for the receipt API tests."""

import json
from pathlib import Path

import pytest

from receipt_api import create_app
from receipt_api.config import TestConfig
from receipt_api.services.receipt_store import ReceiptStore

TESTDATA = Path(__file__).parent / "testdata"


def load_receipt(name: str) -> dict:
    with open(TESTDATA / name, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def store():
    return ReceiptStore()


@pytest.fixture
def app(store):
    return create_app(TestConfig, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def target_payload():
    return load_receipt("readme-target-receipt.json")
