import logging

from flask import Blueprint, jsonify, request
from utils.errors import _sanitize_error_message
from utils.services import get_job_search_service

from services.jobs import ConfigurationError, UpstreamError, ValidationError
from services.shared import log_with_context

logger = logging.getLogger(__name__)
jobs_bp = Blueprint("jobs", __name__)


def _request_params() -> dict:
    """Read query parameters from the JSON/form body for POST, the query string otherwise."""
    if request.method == "POST":
        body = request.get_json(silent=True)
        if isinstance(body, dict):
            return body
        return request.form.to_dict()
    return request.args.to_dict()


@jobs_bp.route("/scrape-jobs", methods=["GET", "POST"])
def scrape_jobs():
    """Search jobs for a keyword and location, serving repeat queries from cache."""
    params = _request_params()
    log_with_context(
        logger,
        logging.INFO,
        "Request to /scrape-jobs",
        method=request.method,
        keyword=params.get("keyword"),
        location=params.get("location"),
    )

    try:
        result = get_job_search_service().search(
            keyword=params.get("keyword"),
            location=params.get("location"),
            next_page_token=params.get("next_page_token"),
        )
        return jsonify(result.to_dict()), 200
    except ValidationError as e:
        logger.warning(f"Rejected job search: {e}")
        return jsonify({"error": str(e)}), e.status_code
    except ConfigurationError as e:
        return jsonify({"error": str(e)}), e.status_code
    except UpstreamError as e:
        return jsonify(
            {
                "error": e.provider_error or str(e),
                "details": _sanitize_error_message(e.details),
            }
        ), e.status_code
    except Exception as e:
        logger.error(f"Error searching jobs: {e}", exc_info=True)
        return jsonify(
            {"error": "Failed to fetch jobs", "details": _sanitize_error_message(e)}
        ), 500
