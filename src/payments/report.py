"""Tabular view of a product catalog."""

import pandas as pd

from .models import ProductCatalog

COLUMNS = ["SKU", "Display_Name", "Price", "Accounting_Type", "Images", "Metadata_Keys"]


def catalog_frame(catalog: ProductCatalog) -> pd.DataFrame:
    rows = [
        {
            "SKU": p.sku,
            "Display_Name": p.display_name,
            "Price": p.price,
            "Accounting_Type": p.accounting_type.value,
            "Images": ", ".join(p.images.values()),
            "Metadata_Keys": ", ".join(p.metadata),
        }
        for p in catalog
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
