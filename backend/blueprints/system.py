import logging

from flask import Blueprint, jsonify
from utils.services import get_result_cache

logger = logging.getLogger(__name__)
system_bp = Blueprint("system", __name__)


@system_bp.route("/")
def root():
    """Liveness message."""
    logger.info("Root URL hit")
    return "Google Jobs API is running...", 200, {"Content-Type": "text/plain; charset=utf-8"}


@system_bp.route("/api/health")
def api_health():
    """Health check endpoint."""
    cache = get_result_cache()
    return jsonify(
        {
            "status": "degraded" if cache.closed else "healthy",
            "cache": {"entries": len(cache), "closed": cache.closed},
        }
    )
