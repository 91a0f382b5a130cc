"""Exceptions raised while loading, validating and injecting product catalogs."""

from __future__ import annotations
from typing import Iterable, List


class CatalogError(Exception):
    pass


class SchemaValidationError(CatalogError):
    """products.json does not have the expected shape."""

    PREFIX = "products.json validation error"

    def __init__(self, diagnostics: Iterable[str]):
        self.diagnostics: List[str] = list(diagnostics)
        super().__init__(f"{self.PREFIX}: " + "; ".join(self.diagnostics))


class ReservedMetadataKeyError(CatalogError):
    def __init__(self, prefix: str, keys: Iterable[str]):
        self.prefix = prefix
        self.keys: List[str] = list(keys)
        super().__init__(
            f'Products metadata cannot start with "{prefix}". Invalid keys: {", ".join(self.keys)}'
        )


class MissingCapabilityError(CatalogError):
    pass


class EmptyCatalogError(CatalogError):
    pass


class MissingAssetsError(CatalogError):
    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(
            f"Product images {', '.join(self.missing)} are not included in the assets"
        )


class IconValidationError(CatalogError):
    """Base for product icon checks."""


class NotAnImageError(IconValidationError):
    pass


class WrongFormatError(IconValidationError):
    pass


class NotSquareError(IconValidationError):
    pass


class TooSmallError(IconValidationError):
    pass


class AssetPathError(IconValidationError):
    def __init__(self, paths: Iterable[str]):
        self.paths: List[str] = list(paths)
        super().__init__(
            f"Product images {', '.join(self.paths)} must be inside the assets directory"
        )


__all__ = [
    "CatalogError",
    "SchemaValidationError",
    "ReservedMetadataKeyError",
    "MissingCapabilityError",
    "EmptyCatalogError",
    "MissingAssetsError",
    "IconValidationError",
    "NotAnImageError",
    "WrongFormatError",
    "NotSquareError",
    "TooSmallError",
    "AssetPathError",
]
