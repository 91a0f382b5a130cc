"""Locate and read products.json for a project."""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..config import PaymentsSettings
from ..errors import SchemaValidationError
from ..files import FileAccess, LocalFileAccess, PathLike
from ..models import ProductCatalog
from .validator import validate_products_payload

LOGGER = logging.getLogger(__name__)


def products_json_path(project_root: PathLike, config: Optional[PaymentsSettings] = None) -> Path:
    config = config or PaymentsSettings()
    return Path(project_root) / config.products_path


def load_products_json(path: PathLike, files: Optional[FileAccess] = None) -> Any:
    files = files or LocalFileAccess()
    try:
        return json.loads(files.read_text(path))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaValidationError([f"invalid JSON in {Path(path).name}: {e}"]) from e


def load_catalog(
    project_root: PathLike,
    files: Optional[FileAccess] = None,
    config: Optional[PaymentsSettings] = None,
) -> ProductCatalog:
    """Read the project's products.json.

    A missing file means the app sells nothing and yields an ABSENT catalog.
    Read errors other than a missing file propagate as OSError.
    """
    files = files or LocalFileAccess()
    path = products_json_path(project_root, config)
    if not files.exists(path):
        LOGGER.debug(f"No products file at {path}; app declares no products")
        return ProductCatalog.absent(source=str(path))
    data = load_products_json(path, files)
    catalog = validate_products_payload(data, config, source=str(path))
    LOGGER.info(f"Loaded {len(catalog)} products from {path}")
    return catalog


__all__ = ["load_catalog", "load_products_json", "products_json_path"]
