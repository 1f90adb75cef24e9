# catalog_builder/api/v1/catalogs.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required

from catalog_builder.models.catalog import Catalog
from catalog_builder.application.lookups import get_catalog
from catalog_builder.application.catalogs.create_catalog import create_catalog as create_catalog_service
from catalog_builder.application.catalogs.update_catalog import update_catalog as update_catalog_service
from catalog_builder.application.catalogs.delete_catalog import delete_catalog as delete_catalog_service
from catalog_builder.application.catalogs.duplicate_catalog import duplicate_catalog as duplicate_catalog_service
from catalog_builder.application.catalogs.update_catalog_flags import (
    batch_update_catalog,
    set_catalog_link_active,
    set_catalog_on_profile,
    set_catalog_status,
)
from catalog_builder.normalizers.catalog import normalize_catalog
from catalog_builder.normalizers.pagination import normalize_pagination
from catalog_builder.utils.decorators import json_body, user_required
from catalog_builder.utils.pagination import paginate_cursor
from . import v1_bp


def _admin_catalog(catalog, include_blocks=False):
    return normalize_catalog(catalog, admin=True, include_blocks=include_blocks)


# ------------------------
# Catalogs
# ------------------------

@v1_bp.route("/catalogs", methods=["POST"])
@jwt_required()
@user_required
@json_body
def create_catalog(data):
    catalog = create_catalog_service(
        user_id=g.current_user_id,
        title=data.get("title"),
        slug=data.get("slug"),
        description=data.get("description"),
        cover=data.get("cover"),
        theme_overrides=data.get("theme_overrides"),
    )
    return jsonify(_admin_catalog(catalog)), 201


@v1_bp.route("/catalogs", methods=["GET"])
@jwt_required()
@user_required
def list_catalogs():
    limit = request.args.get("limit", 20, type=int)
    cursor = request.args.get("cursor")

    query = Catalog.query.filter_by(user_id=g.current_user_id)
    if status := request.args.get("status"):  # rascunho | publicado
        query = query.filter_by(status=status)

    items, meta = paginate_cursor(query, model=Catalog, limit=limit, cursor=cursor)
    return jsonify(normalize_pagination(items, _admin_catalog, cursor=meta))


@v1_bp.route("/catalogs/<catalog_id>", methods=["GET"])
@jwt_required()
@user_required
def get_catalog_by_id(catalog_id):
    catalog = get_catalog(catalog_id, g.current_user_id)
    return jsonify(_admin_catalog(catalog, include_blocks=True))


@v1_bp.route("/catalogs/<catalog_id>", methods=["PUT"])
@jwt_required()
@user_required
@json_body
def update_catalog(catalog_id, data):
    catalog = update_catalog_service(catalog_id=catalog_id, user_id=g.current_user_id, data=data)
    return jsonify(_admin_catalog(catalog)), 200


@v1_bp.route("/catalogs/<catalog_id>", methods=["DELETE"])
@jwt_required()
@user_required
def delete_catalog(catalog_id):
    delete_catalog_service(catalog_id=catalog_id, user_id=g.current_user_id)
    return jsonify({"message": "Catalog deleted successfully"}), 200


@v1_bp.route("/catalogs/<catalog_id>/duplicate", methods=["POST"])
@jwt_required()
@user_required
def duplicate_catalog(catalog_id):
    catalog = duplicate_catalog_service(catalog_id=catalog_id, user_id=g.current_user_id)
    return jsonify(_admin_catalog(catalog, include_blocks=True)), 201


# ------------------------
# Publish flags
# ------------------------

@v1_bp.route("/catalogs/<catalog_id>/status", methods=["POST"])
@jwt_required()
@user_required
@json_body
def set_status(catalog_id, data):
    catalog = set_catalog_status(
        catalog_id=catalog_id, user_id=g.current_user_id, status=data.get("status")
    )
    return jsonify(_admin_catalog(catalog)), 200


@v1_bp.route("/catalogs/<catalog_id>/link", methods=["POST"])
@jwt_required()
@user_required
@json_body
def set_link(catalog_id, data):
    catalog = set_catalog_link_active(
        catalog_id=catalog_id, user_id=g.current_user_id, link_active=data.get("link_active")
    )
    return jsonify(_admin_catalog(catalog)), 200


@v1_bp.route("/catalogs/<catalog_id>/profile", methods=["POST"])
@jwt_required()
@user_required
@json_body
def set_on_profile(catalog_id, data):
    catalog = set_catalog_on_profile(
        catalog_id=catalog_id, user_id=g.current_user_id, on_profile=data.get("on_profile")
    )
    return jsonify(_admin_catalog(catalog)), 200


@v1_bp.route("/catalogs/<catalog_id>/publish", methods=["POST"])
@jwt_required()
@user_required
@json_body
def publish_catalog(catalog_id, data):
    """Publish dialog: status and link (and optionally profile) in one write."""
    catalog = batch_update_catalog(catalog_id=catalog_id, user_id=g.current_user_id, updates=data)
    return jsonify(_admin_catalog(catalog)), 200
