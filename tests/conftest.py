import sys, pathlib

import pytest

# Ensure project src directory is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from payments.config import PAYMENT_PROCESSOR_NAME, PAYMENTS_SERVICE_NAME  # noqa: E402


class MemoryFileAccess:
    """In-memory stand-in for the local filesystem."""

    def __init__(self, files=None, errors=None):
        self.files = {str(k): v for k, v in (files or {}).items()}
        self.errors = {str(k): v for k, v in (errors or {}).items()}

    def exists(self, path):
        key = str(path)
        return key in self.files or key in self.errors

    def _get(self, path):
        key = str(path)
        if key in self.errors:
            raise self.errors[key]
        if key not in self.files:
            raise FileNotFoundError(key)
        return self.files[key]

    def read_text(self, path):
        data = self._get(path)
        return data.decode("utf-8") if isinstance(data, bytes) else data

    def read_bytes(self, path):
        data = self._get(path)
        return data.encode("utf-8") if isinstance(data, str) else data


PRODUCT_1 = {
    "sku": "product-1",
    "displayName": "Product 1",
    "price": 25,
    "accountingType": "INSTANT",
    "metadata": {},
}


def bundle_payload(provides=(), uses=(), asset_ids=None):
    return {
        "code": "",
        "assetIds": dict(asset_ids or {}),
        "dependencies": {
            "hostname": "",
            "provides": [
                {"definition": {"fullName": name, "methods": [], "name": "", "version": ""}, "partitionsBy": []}
                for name in provides
            ],
            "uses": [{"typeName": name, "name": ""} for name in uses],
        },
    }


@pytest.fixture
def product_payload():
    return dict(PRODUCT_1)


@pytest.fixture
def processor_bundle_payload():
    return bundle_payload(provides=[PAYMENT_PROCESSOR_NAME])


@pytest.fixture
def service_bundle_payload():
    return bundle_payload(uses=[PAYMENTS_SERVICE_NAME])
