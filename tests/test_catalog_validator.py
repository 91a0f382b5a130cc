import pytest

from payments.catalog.validator import validate_products_payload
from payments.config import PaymentsSettings
from payments.errors import ReservedMetadataKeyError, SchemaValidationError
from payments.models import AccountingType, CatalogState


def test_valid_single_product(product_payload):
    catalog = validate_products_payload({"products": [product_payload]})
    assert catalog.state is CatalogState.POPULATED
    assert catalog.skus == ["product-1"]
    product = catalog.products[0]
    assert product.display_name == "Product 1"
    assert product.price == 25
    assert product.accounting_type is AccountingType.INSTANT
    assert dict(product.metadata) == {}
    assert product.icon is None


def test_schema_key_is_tolerated(product_payload):
    catalog = validate_products_payload({"$schema": "https://example.invalid/products.json", "products": [product_payload]})
    assert len(catalog) == 1


def test_empty_products_list_is_empty_state():
    catalog = validate_products_payload({"products": []})
    assert catalog.state is CatalogState.EMPTY
    assert len(catalog) == 0


def test_root_must_be_object(product_payload):
    with pytest.raises(SchemaValidationError, match="products.json validation error"):
        validate_products_payload([product_payload])


def test_price_must_be_number(product_payload):
    product_payload["price"] = "not a number"
    with pytest.raises(SchemaValidationError) as exc:
        validate_products_payload({"products": [product_payload]})
    assert str(exc.value).startswith("products.json validation error: ")
    assert "products[0].price must be a number" in str(exc.value)


@pytest.mark.parametrize("price", [0, -5, True])
def test_price_must_be_positive_number(product_payload, price):
    product_payload["price"] = price
    with pytest.raises(SchemaValidationError):
        validate_products_payload({"products": [product_payload]})


def test_unknown_accounting_type(product_payload):
    product_payload["accountingType"] = "FOREVER"
    with pytest.raises(SchemaValidationError, match="accountingType must be one of"):
        validate_products_payload({"products": [product_payload]})


def test_all_violations_reported_together(product_payload):
    bad_one = dict(product_payload, price="x")
    bad_two = {"sku": "product-2", "displayName": "", "price": 5, "accountingType": "DURABLE", "colour": "red"}
    with pytest.raises(SchemaValidationError) as exc:
        validate_products_payload({"products": [product_payload, bad_one, bad_two]})
    diagnostics = exc.value.diagnostics
    assert "products[1].price must be a number, got 'x'" in diagnostics
    assert "products[2].displayName must be a non-empty string" in diagnostics
    assert "products[2].colour is not an allowed property" in diagnostics


def test_one_invalid_product_rejects_whole_file(product_payload):
    good = dict(product_payload, sku="good")
    bad = dict(product_payload, sku="bad")
    del bad["displayName"]
    with pytest.raises(SchemaValidationError, match=r"products\[1\].displayName is required"):
        validate_products_payload({"products": [good, bad]})


def test_metadata_values_must_be_strings(product_payload):
    product_payload["metadata"] = {"level": 3}
    with pytest.raises(SchemaValidationError, match="metadata.level must be a string"):
        validate_products_payload({"products": [product_payload]})


def test_duplicate_sku_rejected(product_payload):
    with pytest.raises(SchemaValidationError, match="duplicates sku 'product-1'"):
        validate_products_payload({"products": [product_payload, dict(product_payload)]})


def test_reserved_metadata_key(product_payload):
    product_payload["metadata"] = {"devvit-invalid": "this breaks upload"}
    with pytest.raises(ReservedMetadataKeyError) as exc:
        validate_products_payload({"products": [product_payload]})
    assert str(exc.value) == 'Products metadata cannot start with "devvit-". Invalid keys: devvit-invalid'


def test_reserved_metadata_lists_every_key(product_payload):
    first = dict(product_payload, metadata={"devvit-x": "1", "ok": "2", "devvit-y": "3"})
    second = dict(product_payload, sku="product-2", metadata={"devvit-z": "4", "devvit-x": "5"})
    with pytest.raises(ReservedMetadataKeyError) as exc:
        validate_products_payload({"products": [first, second]})
    assert exc.value.keys == ["devvit-x", "devvit-y", "devvit-z"]
    assert "devvit-x, devvit-y, devvit-z" in str(exc.value)


def test_non_reserved_metadata_accepted(product_payload):
    product_payload["metadata"] = {"tier": "gold", "x-devvit-note": "fine"}
    catalog = validate_products_payload({"products": [product_payload]})
    assert dict(catalog.products[0].metadata) == {"tier": "gold", "x-devvit-note": "fine"}


def test_reserved_prefix_is_configurable(product_payload):
    product_payload["metadata"] = {"acme-flag": "1"}
    with pytest.raises(ReservedMetadataKeyError, match="acme-flag"):
        validate_products_payload(
            {"products": [product_payload]}, PaymentsSettings(reserved_metadata_prefix="acme-")
        )


@pytest.mark.parametrize("price", [float("inf"), float("nan")])
def test_price_must_be_finite(product_payload, price):
    product_payload["price"] = price
    with pytest.raises(SchemaValidationError, match="price must be a finite number"):
        validate_products_payload({"products": [product_payload]})
