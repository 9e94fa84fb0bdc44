"""Shared fixtures for the test suite."""

import copy

import pytest
from fastapi.testclient import TestClient

from finrecord.main import app
from finrecord.models import RiskConfig
from finrecord.storage.filestore import FileStore


VALID_RECORD = {
    "transactionId": "TXN123456789",
    "userId": "USER98765",
    "transactionDetails": {
        "amount": 250.00,
        "currency": "USD",
        "transactionDate": "2024-04-18T12:34:56Z",
        "paymentMethod": "CreditCard",
        "merchantDetails": {
            "merchantId": "MERCHANT12345",
            "name": "Example Merchant",
            "category": "Electronics",
            "countryCode": "US",
        },
    },
    "userDetails": {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "phone": "+11234567890",
        "billingAddress": {
            "street": "123 Elm St",
            "city": "Anytown",
            "state": "CA",
            "postalCode": "90210",
            "country": "USA",
        },
    },
    "additionalInfo": {
        "deviceIp": "192.168.1.1",
        "userAgent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36"
        ),
    },
}

INVALID_RECORD = {"transactionId": "TXN123456789"}


@pytest.fixture
def risk_config():
    return RiskConfig()


@pytest.fixture
def file_store(tmp_path):
    return FileStore(tmp_path / "data")


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("FINRECORD_DATA_DIR", str(tmp_path / "mnt"))
    monkeypatch.setenv("FINRECORD_STORE_FILENAME", "processedData.json")
    with TestClient(app) as c:
        yield c


def make_record(**sections) -> dict:
    """Return a deep copy of the example record with top-level overrides."""
    record = copy.deepcopy(VALID_RECORD)
    record.update(sections)
    return record


def drop_field(record: dict, path: str) -> dict:
    """Remove the field at a dotted path from a record, in place."""
    *parents, last = path.split(".")
    node = record
    for key in parents:
        node = node[key]
    del node[last]
    return record
