"""Validation for products.json payload."""

from __future__ import annotations
import math
import numbers
from typing import Any, Dict, List, Optional

from ..config import PaymentsSettings
from ..errors import ReservedMetadataKeyError, SchemaValidationError
from ..models import AccountingType, Product, ProductCatalog

REQUIRED_FIELDS = ("sku", "displayName", "price", "accountingType")
OPTIONAL_FIELDS = ("description", "metadata", "images")
ROOT_FIELDS = ("$schema", "products")
ACCOUNTING_TYPES = [t.value for t in AccountingType]


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_string_map(value: Any, where: str, errors: List[str]) -> Dict[str, str]:
    if not isinstance(value, dict):
        errors.append(f"{where} must be an object")
        return {}
    clean = {}
    for key, item in value.items():
        if not isinstance(item, str):
            errors.append(f"{where}.{key} must be a string")
            continue
        clean[key] = item
    return clean


def _check_product(idx: int, entry: Any, errors: List[str]) -> Optional[Product]:
    where = f"products[{idx}]"
    if not isinstance(entry, dict):
        errors.append(f"{where} is not an object")
        return None
    before = len(errors)
    for name in REQUIRED_FIELDS:
        if name not in entry:
            errors.append(f"{where}.{name} is required")
    for name in entry:
        if name not in REQUIRED_FIELDS and name not in OPTIONAL_FIELDS:
            errors.append(f"{where}.{name} is not an allowed property")

    sku = entry.get("sku")
    if "sku" in entry and (not isinstance(sku, str) or not sku.strip()):
        errors.append(f"{where}.sku must be a non-empty string")
    display_name = entry.get("displayName")
    if "displayName" in entry and (not isinstance(display_name, str) or not display_name.strip()):
        errors.append(f"{where}.displayName must be a non-empty string")
    price = entry.get("price")
    if "price" in entry:
        if not _is_number(price):
            errors.append(f"{where}.price must be a number, got {price!r}")
        elif not math.isfinite(price):
            errors.append(f"{where}.price must be a finite number, got {price!r}")
        elif not price > 0:
            errors.append(f"{where}.price must be positive, got {price!r}")
    accounting = entry.get("accountingType")
    if "accountingType" in entry and accounting not in ACCOUNTING_TYPES:
        errors.append(
            f"{where}.accountingType must be one of {', '.join(ACCOUNTING_TYPES)}, got {accounting!r}"
        )
    description = entry.get("description")
    if description is not None and not isinstance(description, str):
        errors.append(f"{where}.description must be a string")
    metadata = _check_string_map(entry.get("metadata", {}), f"{where}.metadata", errors)
    images = _check_string_map(entry.get("images", {}), f"{where}.images", errors)

    if len(errors) > before:
        return None
    return Product(
        sku=sku,
        display_name=display_name,
        price=price,
        accounting_type=AccountingType(accounting),
        metadata=metadata,
        images=images,
        description=description,
    )


def validate_products_payload(
    data: Any, config: Optional[PaymentsSettings] = None, source: Optional[str] = None
) -> ProductCatalog:
    """Turn raw products.json content into a ProductCatalog.

    Every structural problem in the file is collected and reported in a single
    SchemaValidationError. Reserved metadata keys are only reported once the
    structure is valid.
    """
    config = config or PaymentsSettings()
    if not isinstance(data, dict):
        raise SchemaValidationError([f"root must be an object, got {type(data).__name__}"])
    errors: List[str] = []
    for name in data:
        if name not in ROOT_FIELDS:
            errors.append(f"{name} is not an allowed property")
    products = data.get("products")
    if not isinstance(products, list):
        errors.append("'products' must be a list")
        raise SchemaValidationError(errors)

    seen = set()
    normed: List[Product] = []
    for idx, entry in enumerate(products):
        product = _check_product(idx, entry, errors)
        if product is None:
            continue
        if product.sku in seen:
            errors.append(f"products[{idx}].sku duplicates sku '{product.sku}'")
            continue
        seen.add(product.sku)
        normed.append(product)
    if errors:
        raise SchemaValidationError(errors)

    prefix = config.reserved_metadata_prefix
    reserved: List[str] = []
    for product in normed:
        for key in product.metadata:
            if key.startswith(prefix) and key not in reserved:
                reserved.append(key)
    if reserved:
        raise ReservedMetadataKeyError(prefix, reserved)

    return ProductCatalog(products=tuple(normed), source=source)


__all__ = ["validate_products_payload", "ACCOUNTING_TYPES"]
