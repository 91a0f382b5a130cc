"""Build the payments config for a bundle from its product catalog.

Checks run in a fixed order and stop at the first failure:

1. the bundle provides or uses a payments service
2. the catalog has at least one product
3. every referenced image is in the bundle's asset manifest (optional)

Only then is the config assembled and, through ``inject_payments_config``,
attached to the bundle. A failed build leaves the bundle untouched.
"""

from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional

from .config import PaymentsSettings
from .errors import EmptyCatalogError, MissingAssetsError, MissingCapabilityError
from .models import Bundle, CatalogState, PaymentsConfig, Product, ProductCatalog

LOGGER = logging.getLogger(__name__)


def bundle_handles_payments(bundle: Bundle, config: Optional[PaymentsSettings] = None) -> bool:
    config = config or PaymentsSettings()
    if bundle.dependencies is None:
        return False
    names = config.payment_service_names
    return any(c.full_name in names for c in bundle.dependencies.all_capabilities())


def missing_product_assets(bundle: Bundle, products: Iterable[Product]) -> List[str]:
    missing: List[str] = []
    for product in products:
        for filename in product.images.values():
            if filename not in bundle.asset_ids and filename not in missing:
                missing.append(filename)
    return missing


def make_payments_config(products: Iterable[Product]) -> PaymentsConfig:
    by_sku: Dict[str, Product] = {}
    for product in products:
        if product.sku in by_sku:
            LOGGER.warning(f"Duplicate sku '{product.sku}'; keeping the last declaration")
        by_sku[product.sku] = product
    return PaymentsConfig(products=by_sku)


def build_payments_config(
    bundle: Bundle,
    catalog: ProductCatalog,
    verify_assets: bool = True,
    config: Optional[PaymentsSettings] = None,
) -> PaymentsConfig:
    config = config or PaymentsSettings()
    if catalog.state is CatalogState.ABSENT:
        raise ValueError("cannot build a payments config without a products file")

    if not bundle_handles_payments(bundle, config):
        raise MissingCapabilityError(
            f"Products are declared in `{config.products_path}`, but your app does not handle "
            "payment processing. Add a payment handler to your app."
        )
    if catalog.state is CatalogState.EMPTY:
        raise EmptyCatalogError(
            "Your app handles payments, but you must specify products in the "
            f"`{config.products_path}` config file"
        )
    if verify_assets:
        missing = missing_product_assets(bundle, catalog)
        if missing:
            raise MissingAssetsError(missing)
    else:
        LOGGER.debug("Skipping product image asset verification")

    return make_payments_config(catalog)


def inject_payments_config(
    bundle: Bundle,
    catalog: ProductCatalog,
    verify_assets: Optional[bool] = None,
    config: Optional[PaymentsSettings] = None,
) -> Optional[PaymentsConfig]:
    """Attach the payments config to ``bundle``; a no-op when there is no products file."""
    config = config or PaymentsSettings()
    if catalog.state is CatalogState.ABSENT:
        return None
    if bundle.payments_config is not None:
        raise ValueError("bundle already has a payments config")
    if verify_assets is None:
        verify_assets = config.verify_assets
    payments_config = build_payments_config(bundle, catalog, verify_assets, config)
    bundle.payments_config = payments_config
    LOGGER.info(f"Injected {len(payments_config)} products into bundle payments config")
    return payments_config


__all__ = [
    "bundle_handles_payments",
    "build_payments_config",
    "inject_payments_config",
    "make_payments_config",
    "missing_product_assets",
]
