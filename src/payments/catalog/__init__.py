"""Product catalog loading & validation."""

from .loader import load_catalog, load_products_json, products_json_path  # noqa: F401
from .validator import validate_products_payload  # noqa: F401

__all__ = [
    "load_catalog",
    "load_products_json",
    "products_json_path",
    "validate_products_payload",
]
