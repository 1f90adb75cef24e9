from functools import wraps
from flask import g, jsonify, request
from flask_jwt_extended import get_jwt_identity


def user_required(fn):
    """
    Resolves the authenticated user id into ``g.current_user_id``.
    Must be stacked under ``@jwt_required()``.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        identity = get_jwt_identity()
        if not identity:
            return jsonify({"error": "Unauthorized", "message": "User identity missing"}), 401

        g.current_user_id = str(identity)
        return fn(*args, **kwargs)
    return wrapper


def json_body(fn):
    """
    Passes the parsed JSON object body as ``data``; rejects non-object payloads.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return jsonify({"error": "BadRequest", "message": "Invalid payload"}), 400
        return fn(*args, data=data, **kwargs)
    return wrapper
