#!/usr/bin/env python3
"""Validate a project's products.json and, optionally, its payments config.
Exit non-zero if invalid."""
import argparse
import json
import logging
import os
import sys
from pathlib import Path

sys.path.append(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from payments import (  # noqa: E402
    Bundle,
    CatalogState,
    PaymentsSettings,
    inject_payments_config,
    load_catalog,
    verify_product_icons,
)
from payments.errors import (  # noqa: E402
    EmptyCatalogError,
    IconValidationError,
    MissingAssetsError,
    MissingCapabilityError,
    ReservedMetadataKeyError,
    SchemaValidationError,
)
from payments.report import catalog_frame  # noqa: E402
from payments.utils import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", default=".", help="Project root containing src/products.json")
    parser.add_argument("--bundle", help="Bundle manifest JSON to build a payments config against")
    parser.add_argument("--verify-icons", action="store_true", help="Validate icon files in the assets dir")
    parser.add_argument("--skip-assets", action="store_true", help="Do not check images against the bundle")
    parser.add_argument("--config", default="payments.conf", help="Settings file (key = value)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser.parse_args(argv)


def run(args) -> int:
    settings = PaymentsSettings.from_config_file(args.config)
    root = Path(args.root)
    try:
        catalog = load_catalog(root, config=settings)
    except (SchemaValidationError, ReservedMetadataKeyError) as e:
        logger.error(str(e))
        return 2
    if catalog.state is CatalogState.ABSENT:
        logger.info("No products.json found; nothing to validate")
        return 0
    print(catalog_frame(catalog).to_string(index=False))

    try:
        if args.verify_icons:
            verify_product_icons(catalog, root / settings.assets_dir, config=settings)
        if args.bundle:
            with open(args.bundle, "r", encoding="utf-8") as f:
                bundle = Bundle.from_dict(json.load(f))
            # None defers to settings.verify_assets
            verify_assets = False if args.skip_assets else None
            inject_payments_config(bundle, catalog, verify_assets=verify_assets, config=settings)
            print(json.dumps(bundle.payments_config.to_dict(), indent=2))
    except (MissingCapabilityError, EmptyCatalogError) as e:
        logger.error(str(e))
        return 3
    except MissingAssetsError as e:
        logger.error(str(e))
        return 4
    except IconValidationError as e:
        logger.error(str(e))
        return 5
    print(f"products.json valid: {len(catalog)} products")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
