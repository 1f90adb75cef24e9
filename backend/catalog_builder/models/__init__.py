from .audit_log import AuditLog
from .catalog import Catalog
from .catalog_block import CatalogBlock
from .draft import Draft
from .product import (
    Product,
    ProductOption,
    ProductOptionValue,
    ProductVariant,
    product_variant_options,
)
