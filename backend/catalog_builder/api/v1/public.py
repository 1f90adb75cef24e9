# catalog_builder/api/v1/public.py
from flask import jsonify

from catalog_builder.exceptions import RecordNotFound
from catalog_builder.models.catalog import Catalog
from catalog_builder.normalizers.catalog import normalize_public_catalog
from . import v1_bp


@v1_bp.route("/public/catalogs/<user_id>/<slug>", methods=["GET"])
def get_public_catalog(user_id, slug):
    """
    Visitor view. Only published catalogs with an active link are served;
    hidden blocks are left out.
    """
    catalog = Catalog.query.filter_by(user_id=user_id, slug=slug).first()

    if not catalog or not catalog.is_public:
        raise RecordNotFound("catalog", slug)

    return jsonify(normalize_public_catalog(catalog))
