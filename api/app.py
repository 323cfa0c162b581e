"""
Budget Tracker – Flask application factory.
"""

from flask import Flask
from flask_cors import CORS

from api.categories import create_categories_blueprint
from api.handler import CategoryRequestHandler
from logger import get_logger

logger = get_logger()


def create_app(services):
    """Create the Flask app wired to the given Services container."""
    app = Flask(__name__)

    # Front-end dev servers call the API with credentials
    CORS(
        app,
        origins=services.config.cors_origins,
        supports_credentials=True,
    )

    handler = CategoryRequestHandler(services.categories, services.suggester)
    app.register_blueprint(create_categories_blueprint(handler))

    @app.route("/health")
    def health():
        return {"status": "ok"}

    logger.info(
        f"Budget Tracker API ready (suggester: {type(services.suggester).__name__})"
    )

    return app
