from flask import jsonify
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger

logger = get_logger('error_handler')

_ARG_LOCATIONS = ('json', 'form', 'files', 'query', 'path', '_schema')


def _envelope(status, message):
    return jsonify({
        "status": status,
        "data": None,
        "message": message
    }), status


def _first_validation_message(messages, field=None):
    #NOTE: webargs nests messages as {location: {field: [message, ...]}}
    if isinstance(messages, dict):
        for key, value in messages.items():
            name = field if key in _ARG_LOCATIONS else key
            return _first_validation_message(value, name)
    elif isinstance(messages, list):
        if messages:
            return _first_validation_message(messages[0], field)
    elif messages:
        return f"{field}: {messages}" if field else str(messages)
    return None


def register_error_handlers(app):
    @app.errorhandler(BusinessError)
    def handle_business_error(e):
        return _envelope(e.status, e.message)

    @app.errorhandler(422)
    def handle_validation_error(e):
        messages = (getattr(e, 'data', None) or {}).get('messages', {})
        message = _first_validation_message(messages) or APIError.INVALID_INPUT_VALUE.message
        return _envelope(APIError.INVALID_INPUT_VALUE.status, message)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return _envelope(e.code or 500, e.description or e.name)

    @app.errorhandler(PyMongoError)
    def handle_db_error(e):
        logger.error(f"MongoDB error: {e}")
        return _envelope(APIError.DB_ERROR.status, APIError.DB_ERROR.message)

    @app.errorhandler(Exception)
    def handle_internal_error(e):
        logger.exception(f"Unhandled error: {e}")
        return _envelope(APIError.INTERNAL_SERVER_ERROR.status, APIError.INTERNAL_SERVER_ERROR.message)
