"""Product catalog validation and payments config injection for app bundles."""

from .builder import (  # noqa: F401
    build_payments_config,
    bundle_handles_payments,
    inject_payments_config,
    make_payments_config,
)
from .catalog import load_catalog, validate_products_payload  # noqa: F401
from .config import PaymentsSettings  # noqa: F401
from .errors import *  # noqa: F401,F403
from .images import validate_product_icon, verify_product_icons  # noqa: F401
from .models import (  # noqa: F401
    AccountingType,
    Bundle,
    Capability,
    CatalogState,
    Dependencies,
    PaymentsConfig,
    Product,
    ProductCatalog,
)
