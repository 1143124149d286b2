import logging

from flask import jsonify

from controllers.paging_controller import PagingController
from paging.errors import InvalidInputError

logger = logging.getLogger(__name__)


def init_routes(app, paging_controller=None):
    """Initialize all Flask routes using MVC pattern"""

    paging_controller = paging_controller or PagingController()

    @app.route("/api/paging", methods=["GET", "POST"])
    def api_paging():
        """Describe the paging bar for a result total, page and page size"""
        try:
            return jsonify(paging_controller.paging_preview())
        except ValueError:
            return jsonify({"error": "total and max must be integers"}), 400
        except InvalidInputError as e:
            logger.warning(f"Paging request rejected: {e.message}")
            return jsonify({"error": e.message}), 400
