"""
Categories blueprint – list, create and suggest transaction categories.
"""

import sqlite3

from flask import Blueprint, jsonify, request

from api.handler import CategoryValidationError
from logger import get_logger

logger = get_logger()

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


def create_categories_blueprint(handler):
    """Build the category blueprint bound to *handler*."""
    categories_bp = Blueprint("category", __name__, url_prefix="/api/category")

    @categories_bp.route("/", methods=["GET"])
    def get_all_categories():
        categories = handler.get_all_categories()
        return jsonify([c.to_dict() for c in categories])

    @categories_bp.route("/create", methods=["POST"])
    def create_category():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        try:
            category = handler.create_category(
                data.get("name"),
                data.get("description"),
                data.get("parent_id"),
            )
        except CategoryValidationError as e:
            return jsonify({"error": str(e)}), 400
        except sqlite3.IntegrityError:
            logger.warning(f"Rejected duplicate category name: {data.get('name')!r}")
            return jsonify({"error": f"Category '{data.get('name')}' already exists"}), 409

        return jsonify(category.to_dict())

    @categories_bp.route("/suggest", methods=["GET"])
    def suggest_category():
        description = request.args.get("description")
        if description is None:
            return "Missing required parameter: description", 400, TEXT_PLAIN

        result = handler.suggest(description)
        if not result.ok:
            return result.error, 500, TEXT_PLAIN
        return result.label, 200, TEXT_PLAIN

    return categories_bp
