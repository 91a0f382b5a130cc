"""
Models for product catalogs, bundles and the payments config attached to them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


class AccountingType(str, Enum):
    INSTANT = "INSTANT"
    DURABLE = "DURABLE"
    CONSUMABLE = "CONSUMABLE"
    VALID_FOR_1D = "VALID_FOR_1D"
    VALID_FOR_3D = "VALID_FOR_3D"
    VALID_FOR_7D = "VALID_FOR_7D"
    VALID_FOR_30D = "VALID_FOR_30D"
    VALID_FOR_1Y = "VALID_FOR_1Y"


@dataclass(frozen=True)
class Product:
    """A sellable unit declared in products.json."""

    sku: str
    display_name: str
    price: float
    accounting_type: AccountingType
    metadata: Mapping[str, str] = field(default_factory=dict)
    images: Mapping[str, str] = field(default_factory=dict)
    description: Optional[str] = None

    def __post_init__(self):
        # frozen: freeze the nested mappings too
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        object.__setattr__(self, "images", MappingProxyType(dict(self.images)))

    @property
    def icon(self) -> Optional[str]:
        return self.images.get("icon")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "sku": self.sku,
            "displayName": self.display_name,
            "price": self.price,
            "accountingType": self.accounting_type.value,
            "metadata": dict(self.metadata),
        }
        if self.description is not None:
            data["description"] = self.description
        if self.images:
            data["images"] = dict(self.images)
        return data


class CatalogState(str, Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class ProductCatalog:
    """Ordered products from one products.json, or the absence of that file."""

    products: Tuple[Product, ...] = ()
    source: Optional[str] = None
    present: bool = True

    @classmethod
    def absent(cls, source: Optional[str] = None) -> "ProductCatalog":
        return cls(products=(), source=source, present=False)

    @property
    def state(self) -> CatalogState:
        if not self.present:
            return CatalogState.ABSENT
        if not self.products:
            return CatalogState.EMPTY
        return CatalogState.POPULATED

    @property
    def skus(self) -> List[str]:
        return [p.sku for p in self.products]

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)


@dataclass(frozen=True)
class Capability:
    """A service a bundle provides or uses, named by its fully-qualified name."""

    full_name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Capability":
        definition = data.get("definition") or {}
        full_name = definition.get("fullName") or data.get("typeName") or data.get("fullName") or ""
        return cls(full_name=full_name)


@dataclass
class Dependencies:
    provides: List[Capability] = field(default_factory=list)
    uses: List[Capability] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Dependencies":
        return cls(
            provides=[Capability.from_dict(c) for c in data.get("provides") or []],
            uses=[Capability.from_dict(c) for c in data.get("uses") or []],
        )

    def all_capabilities(self) -> List[Capability]:
        return list(self.provides) + list(self.uses)


@dataclass(frozen=True)
class PaymentsConfig:
    """Validated products keyed by sku, ready to ship inside a bundle."""

    products: Mapping[str, Product] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "products", MappingProxyType(dict(self.products)))

    def __len__(self) -> int:
        return len(self.products)

    def __contains__(self, sku: object) -> bool:
        return sku in self.products

    def __getitem__(self, sku: str) -> Product:
        return self.products[sku]

    def to_dict(self) -> Dict[str, Any]:
        return {"products": {sku: p.to_dict() for sku, p in self.products.items()}}


@dataclass
class Bundle:
    """Built application bundle. Only the parts read or written here are modelled."""

    asset_ids: Dict[str, str] = field(default_factory=dict)
    dependencies: Optional[Dependencies] = None
    payments_config: Optional[PaymentsConfig] = None
    code: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Bundle":
        deps = data.get("dependencies")
        return cls(
            asset_ids=dict(data.get("assetIds") or {}),
            dependencies=Dependencies.from_dict(deps) if deps is not None else None,
            code=data.get("code", ""),
        )


__all__ = [
    "AccountingType",
    "Product",
    "CatalogState",
    "ProductCatalog",
    "Capability",
    "Dependencies",
    "PaymentsConfig",
    "Bundle",
]
