"""
Payments catalog configuration and settings.
"""

import os
from typing import Optional

DEFAULT_PRODUCTS_PATH = "src/products.json"
DEFAULT_ASSETS_DIR = "assets"
DEFAULT_RESERVED_PREFIX = "devvit-"
DEFAULT_MIN_ICON_SIZE = 256
PAYMENT_PROCESSOR_NAME = "devvit.actor.payments.v1alpha.PaymentProcessor"
PAYMENTS_SERVICE_NAME = "devvit.plugin.payments.v1alpha.PaymentsService"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


class PaymentsSettings:
    """Configuration for catalog loading and payments config injection."""

    def __init__(
        self,
        products_path: Optional[str] = None,
        assets_dir: Optional[str] = None,
        reserved_metadata_prefix: str = DEFAULT_RESERVED_PREFIX,
        min_icon_size: int = DEFAULT_MIN_ICON_SIZE,
        verify_assets: bool = True,
        payment_processor_name: str = PAYMENT_PROCESSOR_NAME,
        payments_service_name: str = PAYMENTS_SERVICE_NAME,
    ):
        self.products_path = products_path or DEFAULT_PRODUCTS_PATH
        self.assets_dir = assets_dir or DEFAULT_ASSETS_DIR
        self.reserved_metadata_prefix = reserved_metadata_prefix
        self.min_icon_size = min_icon_size
        self.verify_assets = verify_assets
        self.payment_processor_name = payment_processor_name
        self.payments_service_name = payments_service_name

    @property
    def payment_service_names(self) -> frozenset:
        return frozenset({self.payment_processor_name, self.payments_service_name})

    @classmethod
    def from_env(cls) -> "PaymentsSettings":
        """Create settings from environment variables."""
        return cls(
            products_path=os.getenv("PAYMENTS_PRODUCTS_PATH"),
            assets_dir=os.getenv("PAYMENTS_ASSETS_DIR"),
            reserved_metadata_prefix=os.getenv("PAYMENTS_RESERVED_PREFIX", DEFAULT_RESERVED_PREFIX),
            min_icon_size=int(os.getenv("PAYMENTS_MIN_ICON_SIZE", str(DEFAULT_MIN_ICON_SIZE))),
            verify_assets=_as_bool(os.getenv("PAYMENTS_VERIFY_ASSETS"), True),
            payment_processor_name=os.getenv("PAYMENTS_PROCESSOR_NAME", PAYMENT_PROCESSOR_NAME),
            payments_service_name=os.getenv("PAYMENTS_SERVICE_NAME", PAYMENTS_SERVICE_NAME),
        )

    @classmethod
    def from_config_file(cls, config_path: str = "payments.conf") -> "PaymentsSettings":
        """Create settings from a ``key = value`` configuration file."""
        config = {}
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#"):
                        key, value = line.split("=", 1)
                        config[key.strip()] = value.strip()

        return cls(
            products_path=config.get("products_path"),
            assets_dir=config.get("assets_dir"),
            reserved_metadata_prefix=config.get("reserved_metadata_prefix", DEFAULT_RESERVED_PREFIX),
            min_icon_size=int(config.get("min_icon_size", str(DEFAULT_MIN_ICON_SIZE))),
            verify_assets=_as_bool(config.get("verify_assets"), True),
            payment_processor_name=config.get("payment_processor_name", PAYMENT_PROCESSOR_NAME),
            payments_service_name=config.get("payments_service_name", PAYMENTS_SERVICE_NAME),
        )
