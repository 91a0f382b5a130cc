"""Product icon checks."""

from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from .config import DEFAULT_MIN_ICON_SIZE, PaymentsSettings
from .errors import (
    AssetPathError,
    IconValidationError,
    MissingAssetsError,
    NotAnImageError,
    NotSquareError,
    TooSmallError,
    WrongFormatError,
)
from .files import FileAccess, LocalFileAccess, PathLike
from .models import ProductCatalog

LOGGER = logging.getLogger(__name__)


def validate_product_icon(
    path: PathLike,
    files: Optional[FileAccess] = None,
    min_size: int = DEFAULT_MIN_ICON_SIZE,
) -> None:
    """Raise an IconValidationError subclass unless ``path`` is a square PNG of at least ``min_size`` px."""
    files = files or LocalFileAccess()
    name = Path(path).name
    data = files.read_bytes(path)
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
            fmt = img.format
            width, height = img.size
    except Image.DecompressionBombError as e:
        raise NotAnImageError(f"{name} is not a valid image: too many pixels to decode") from e
    except (UnidentifiedImageError, SyntaxError, ValueError, OSError) as e:
        raise NotAnImageError(f"{name} is not a valid image") from e

    if fmt != "PNG":
        raise WrongFormatError(f"{name} must be a PNG, got {fmt}")
    if width != height:
        raise NotSquareError(f"{name} must be square, got {width}x{height}")
    if width < min_size:
        raise TooSmallError(f"{name} must be at least {min_size}x{min_size}, got {width}x{height}")


def _escapes_root(filename: str) -> bool:
    rel = Path(filename)
    return rel.is_absolute() or ".." in rel.parts


def verify_product_icons(
    catalog: ProductCatalog,
    assets_dir: PathLike,
    files: Optional[FileAccess] = None,
    config: Optional[PaymentsSettings] = None,
) -> None:
    """Check product images on disk before they are bundled.

    Filenames pointing outside the assets directory are rejected first. All
    missing files are reported together; then each image is validated in
    catalog order and the first failure is raised.
    """
    files = files or LocalFileAccess()
    config = config or PaymentsSettings()
    root = Path(assets_dir)

    outside = [
        filename
        for product in catalog
        for filename in product.images.values()
        if _escapes_root(filename)
    ]
    if outside:
        raise AssetPathError(dict.fromkeys(outside))

    missing: List[str] = []
    to_check = []
    for product in catalog:
        for filename in product.images.values():
            if not files.exists(root / filename):
                if filename not in missing:
                    missing.append(filename)
                continue
            to_check.append((product.sku, filename))
    if missing:
        raise MissingAssetsError(missing)

    for sku, filename in to_check:
        try:
            validate_product_icon(root / filename, files, config.min_icon_size)
        except IconValidationError as e:
            raise type(e)(f"Product '{sku}' image {e}") from e
    LOGGER.info(f"Validated {len(to_check)} product images in {root}")


__all__ = ["validate_product_icon", "verify_product_icons"]
