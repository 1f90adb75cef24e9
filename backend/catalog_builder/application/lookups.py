"""
Owner-scoped loaders shared by the application services.
"""
from typing import List, Optional

from catalog_builder.exceptions import RecordNotFound
from catalog_builder.models.catalog import Catalog
from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.models.product import Product, ProductVariant


def get_catalog(catalog_id: str, user_id: str) -> Catalog:
    catalog = Catalog.query.filter_by(id=catalog_id, user_id=user_id).first()
    if not catalog:
        raise RecordNotFound("catalog", catalog_id)
    return catalog


def get_block(block_id: str, user_id: str) -> CatalogBlock:
    block = (
        CatalogBlock.query
        .join(Catalog)
        .filter(CatalogBlock.id == block_id, Catalog.user_id == user_id)
        .first()
    )
    if not block:
        raise RecordNotFound("block", block_id)
    return block


def list_blocks(catalog_id: str) -> List[CatalogBlock]:
    return (
        CatalogBlock.query
        .filter_by(catalog_id=catalog_id)
        .order_by(CatalogBlock.sort.asc(), CatalogBlock.created_at.asc())
        .all()
    )


def catalog_slug_exists(user_id: str, slug: str, exclude_id: Optional[str] = None) -> bool:
    query = Catalog.query.filter_by(user_id=user_id, slug=slug)
    if exclude_id:
        query = query.filter(Catalog.id != exclude_id)
    return query.first() is not None


def get_product(product_id: str, user_id: Optional[str] = None) -> Product:
    query = Product.query.filter_by(id=product_id)
    if user_id is not None:
        query = query.filter_by(user_id=user_id)

    product = query.first()
    if not product:
        raise RecordNotFound("product", product_id)
    return product


def get_variant(variant_id: str, user_id: str) -> ProductVariant:
    variant = (
        ProductVariant.query
        .join(Product)
        .filter(ProductVariant.id == variant_id, Product.user_id == user_id)
        .first()
    )
    if not variant:
        raise RecordNotFound("variant", variant_id)
    return variant
