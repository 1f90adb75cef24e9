from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from catalog_builder.extensions import db
from catalog_builder.domain.invariants.exceptions import InvariantViolation
from catalog_builder.domain.slugs import SlugUnavailable
from catalog_builder.exceptions import CatalogDuplicationError, RecordNotFound


def error_response(error, message, status_code, **extra):
    response = jsonify({"error": error, "message": message, **extra})
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return error_response("InvariantViolation", str(error), 400)

    @app.errorhandler(ValueError)
    def handle_value_error(error):
        return error_response("BadRequest", str(error), 400)

    @app.errorhandler(RecordNotFound)
    def handle_not_found(error):
        return error_response("NotFound", str(error), 404)

    @app.errorhandler(SlugUnavailable)
    def handle_slug_unavailable(error):
        return error_response("SlugUnavailable", str(error), 409)

    @app.errorhandler(CatalogDuplicationError)
    def handle_partial_duplication(error):
        return error_response(
            "CatalogDuplicationError", str(error), 500, catalog_id=error.catalog_id
        )

    @app.errorhandler(SQLAlchemyError)
    def handle_record_store_error(error):
        db.session.rollback()
        current_app.logger.exception("Record store failure")
        return error_response("RecordStoreError", "The operation could not be saved", 503)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return error_response(error.name.replace(" ", ""), error.description, error.code)
