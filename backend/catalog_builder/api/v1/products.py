# catalog_builder/api/v1/products.py
from flask import g, jsonify
from flask_jwt_extended import jwt_required

from catalog_builder.domain.selection import resolve_selection
from catalog_builder.domain.variants import find_matching_variant
from catalog_builder.application.lookups import get_product
from catalog_builder.application.products.create_product import create_product as create_product_service
from catalog_builder.application.products.load_variants import load_product_variants
from catalog_builder.application.products.save_variants import save_product_variants
from catalog_builder.application.products.update_variant import update_variant as update_variant_service
from catalog_builder.normalizers.product import money, normalize_variant, normalize_variants
from catalog_builder.utils.decorators import json_body, user_required
from . import v1_bp


@v1_bp.route("/products", methods=["POST"])
@jwt_required()
@user_required
@json_body
def create_product(data):
    product = create_product_service(
        user_id=g.current_user_id, title=data.get("title"), price=data.get("price")
    )
    return jsonify({
        "id": product.id,
        "title": product.title,
        "price": money(product.price),
    }), 201


@v1_bp.route("/products/<product_id>/variants", methods=["GET"])
@jwt_required()
@user_required
def get_variants(product_id):
    product = get_product(product_id, g.current_user_id)
    return jsonify(normalize_variants(product, load_product_variants(product)))


@v1_bp.route("/products/<product_id>/variants", methods=["PUT"])
@jwt_required()
@user_required
@json_body
def put_variants(product_id, data):
    options = data.get("options") or []
    variants = data.get("variants") or []
    if not isinstance(options, list) or not isinstance(variants, list):
        raise ValueError("options and variants must be lists")

    variants_data = save_product_variants(
        product_id=product_id,
        user_id=g.current_user_id,
        options=options,
        variants=variants,
    )
    product = get_product(product_id, g.current_user_id)
    return jsonify(normalize_variants(product, variants_data)), 200


@v1_bp.route("/products/<product_id>/variants/resolve", methods=["POST"])
@json_body
def resolve_variant(product_id, data):
    """
    Public: resolve a selector state to a variant.

    ``match`` is the first variant compatible with the (possibly partial)
    selection; ``variant`` is only set once every option is chosen.
    """
    selection = data.get("selection") or {}
    if not isinstance(selection, dict):
        raise ValueError("selection must be an object")

    product = get_product(product_id)
    variants_data = load_product_variants(product)

    return jsonify({
        **normalize_variants(product, variants_data, selection=selection),
        "match": normalize_variant(find_matching_variant(variants_data.variants, selection)),
        "variant": normalize_variant(
            resolve_selection(variants_data.options, variants_data.variants, selection)
        ),
    })


@v1_bp.route("/variants/<variant_id>", methods=["PUT"])
@jwt_required()
@user_required
@json_body
def update_variant(variant_id, data):
    variant = update_variant_service(variant_id=variant_id, user_id=g.current_user_id, data=data)
    return jsonify({
        "id": variant.id,
        "sku": variant.sku,
        "price": money(variant.price),
        "is_available": variant.is_available,
        "image_url": variant.image_url,
    }), 200
