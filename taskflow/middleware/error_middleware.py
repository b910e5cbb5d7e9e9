"""
Error Handling Middleware
Renders every failure as a {title, message} JSON envelope
"""
import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from taskflow.utils.errors import ApiError
from taskflow.utils.validators import Helpers

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling service"""

    @staticmethod
    def handle_api_error(error: ApiError) -> tuple:
        """Handle errors raised by controllers and service wrappers"""
        if error.status >= 500:
            logger.error(f"{request.method} {request.path} failed: {error.title}: {error.message}")
        else:
            logger.warning(f"{request.method} {request.path} -> {error.status}: {error.message}")
        return jsonify(error.to_dict()), error.status

    @staticmethod
    def handle_http_error(error: HTTPException) -> tuple:
        """Handle werkzeug errors (unknown route, bad method, payload too large)"""
        logger.warning(f"{request.method} {request.path} -> {error.code}: {error.description}")
        return jsonify(Helpers.build_response(error.name, error.description)), error.code

    @staticmethod
    def handle_generic_error(error: Exception) -> tuple:
        """Handle anything else, honouring an integer `status` attribute"""
        status = getattr(error, 'status', None)
        if not isinstance(status, int) or status < 400:
            status = 500
        logger.exception(f"Unhandled error on {request.method} {request.path}: {error}")
        return jsonify(Helpers.build_response(
            getattr(error, 'title', None) or 'Error',
            str(error) or 'Unknown error'
        )), status


def register_error_handlers(app):
    """Register error handlers with Flask app"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return ErrorHandler.handle_api_error(error)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return ErrorHandler.handle_http_error(error)

    @app.errorhandler(Exception)
    def handle_unhandled_exception(error):
        return ErrorHandler.handle_generic_error(error)
