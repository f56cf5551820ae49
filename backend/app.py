import logging
import os
from typing import Any

from blueprints.jobs import jobs_bp
from blueprints.system import system_bp
from config import Config
from flask import Flask
from flask_cors import CORS
from utils.services import init_app_resources

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(overrides: dict[str, Any] | None = None):
    """Application factory function.

    Args:
        overrides: Config values applied after Config, mainly for tests
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # Initialize CORS
    CORS(
        app,
        origins=app.config["CORS_ORIGINS"],
        methods=app.config["CORS_METHODS"],
        allow_headers=app.config["CORS_HEADERS"],
    )

    # Register Blueprints
    app.register_blueprint(jobs_bp)
    app.register_blueprint(system_bp)

    # One cache and one upstream session per app, released on process exit
    init_app_resources(app)

    if not app.config.get("SERPAPI_KEY"):
        logger.warning("SERPAPI_KEY is not set; uncached searches will fail")

    return app


app = create_app()

if __name__ == "__main__":
    debug = os.getenv("ENVIRONMENT", "development") == "development"
    logger.info(f"Server running on http://localhost:{app.config['PORT']}")
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=debug, use_reloader=debug)
