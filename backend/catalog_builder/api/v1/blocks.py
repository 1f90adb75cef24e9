# catalog_builder/api/v1/blocks.py
from flask import g, jsonify
from flask_jwt_extended import jwt_required

from catalog_builder.domain.navigation import anchor_conflicts, navigation_items
from catalog_builder.application.lookups import get_catalog, list_blocks as list_catalog_blocks
from catalog_builder.application.blocks.add_block import add_block
from catalog_builder.application.blocks.update_block import update_block as update_block_service
from catalog_builder.application.blocks.delete_block import delete_block as delete_block_service
from catalog_builder.application.blocks.duplicate_block import duplicate_block as duplicate_block_service
from catalog_builder.application.blocks.toggle_block_visibility import toggle_block_visibility
from catalog_builder.application.blocks.reorder_blocks import apply_block_order, reorder_blocks as reorder_blocks_service
from catalog_builder.application.blocks.set_navigation_anchor import set_navigation_anchor, update_navigation
from catalog_builder.normalizers.block import normalize_block
from catalog_builder.utils.decorators import json_body, user_required
from . import v1_bp


def _blocks_response(blocks):
    return jsonify({"items": [normalize_block(b, admin=True) for b in blocks]})


def _int_field(data, key):
    value = data.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key} must be an integer")
    return value


# ------------------------
# Catalog blocks
# ------------------------

@v1_bp.route("/catalogs/<catalog_id>/blocks", methods=["GET"])
@jwt_required()
@user_required
def list_blocks(catalog_id):
    catalog = get_catalog(catalog_id, g.current_user_id)
    return _blocks_response(list_catalog_blocks(catalog.id))


@v1_bp.route("/catalogs/<catalog_id>/blocks", methods=["POST"])
@jwt_required()
@user_required
@json_body
def create_block(catalog_id, data):
    if not data.get("type"):
        return jsonify({"error": "BadRequest", "message": "Block type is required"}), 400

    block = add_block(
        catalog_id=catalog_id,
        user_id=g.current_user_id,
        block_type=data["type"],
        data=data.get("data"),
    )
    return jsonify(normalize_block(block, admin=True)), 201


@v1_bp.route("/catalogs/<catalog_id>/blocks/reorder", methods=["POST"])
@jwt_required()
@user_required
@json_body
def reorder_blocks(catalog_id, data):
    """
    Accepts either {"from_index", "to_index"} or {"block_ids": [...]}.
    """
    if "block_ids" in data:
        if not isinstance(data["block_ids"], list):
            raise ValueError("block_ids must be a list")
        blocks = apply_block_order(
            catalog_id=catalog_id, user_id=g.current_user_id, block_ids=data["block_ids"]
        )
    else:
        blocks = reorder_blocks_service(
            catalog_id=catalog_id,
            user_id=g.current_user_id,
            from_index=_int_field(data, "from_index"),
            to_index=_int_field(data, "to_index"),
        )
    return _blocks_response(blocks)


@v1_bp.route("/catalogs/<catalog_id>/navigation", methods=["GET"])
@jwt_required()
@user_required
def get_navigation(catalog_id):
    catalog = get_catalog(catalog_id, g.current_user_id)
    return jsonify({"items": navigation_items(list_catalog_blocks(catalog.id))})


@v1_bp.route("/catalogs/<catalog_id>/navigation", methods=["PUT"])
@jwt_required()
@user_required
@json_body
def put_navigation(catalog_id, data):
    items = data.get("items")
    if not isinstance(items, list):
        raise ValueError("items must be a list")

    blocks = update_navigation(
        catalog_id=catalog_id,
        user_id=g.current_user_id,
        items=items,
        enforce_unique=bool(data.get("enforce_unique", False)),
    )
    return jsonify({"items": navigation_items(blocks)})


# ------------------------
# Single block
# ------------------------

@v1_bp.route("/blocks/<block_id>", methods=["PUT"])
@jwt_required()
@user_required
@json_body
def update_block(block_id, data):
    block = update_block_service(block_id=block_id, user_id=g.current_user_id, data=data.get("data"))
    return jsonify(normalize_block(block, admin=True)), 200


@v1_bp.route("/blocks/<block_id>", methods=["DELETE"])
@jwt_required()
@user_required
def delete_block(block_id):
    delete_block_service(block_id=block_id, user_id=g.current_user_id)
    return jsonify({"message": "Block deleted successfully"}), 200


@v1_bp.route("/blocks/<block_id>/visibility", methods=["POST"])
@jwt_required()
@user_required
def toggle_visibility(block_id):
    block = toggle_block_visibility(block_id=block_id, user_id=g.current_user_id)
    return jsonify(normalize_block(block, admin=True)), 200


@v1_bp.route("/blocks/<block_id>/duplicate", methods=["POST"])
@jwt_required()
@user_required
@json_body
def duplicate_block(block_id, data):
    block = duplicate_block_service(
        block_id=block_id,
        user_id=g.current_user_id,
        carry_navigation=bool(data.get("carry_navigation", False)),
    )
    return jsonify(normalize_block(block, admin=True)), 201


@v1_bp.route("/blocks/<block_id>/anchor", methods=["POST"])
@jwt_required()
@user_required
@json_body
def set_anchor(block_id, data):
    block = set_navigation_anchor(
        block_id=block_id,
        user_id=g.current_user_id,
        label=data.get("label"),
        enforce_unique=bool(data.get("enforce_unique", False)),
    )
    siblings = list_catalog_blocks(block.catalog_id)
    return jsonify({
        **normalize_block(block, admin=True),
        "anchor_conflict": anchor_conflicts(siblings, block.anchor_slug, exclude_id=block.id),
    }), 200
