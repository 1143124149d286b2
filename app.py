import logging

from flask import Flask
from flask_cors import CORS

from config import SECRET_KEY, load_paging_settings
from controllers.paging_controller import PagingController
from routes import init_routes

logger = logging.getLogger(__name__)


def create_app(paging_settings=None):
    """Application factory pattern for better testing and configuration.

    Args:
        paging_settings: Optional PagingSettings override. If not provided, uses the environment.
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = SECRET_KEY

    # Enable CORS for all routes
    CORS(app)

    settings = paging_settings or load_paging_settings()
    logger.info(f"Paging with {settings.page_size} {settings.results_text_plural} per page")

    # Initialize routes
    init_routes(app, PagingController(settings=settings))

    return app


# === Main ===
if __name__ == "__main__":
    import os
    logging.basicConfig(level=logging.INFO)
    debug_mode = os.getenv('FLASK_ENV') != 'production'
    create_app().run(host='0.0.0.0', port=5001, debug=debug_mode)
