from flask import Blueprint, request, jsonify, Response
from typing import Optional
from datetime import datetime
from functools import wraps
import logging

from werkzeug.exceptions import BadRequest

from errors import RelayError, ValidationError
from models.sos import AlertRequest, AlertResult
from services.onesignal_notifier import OneSignalNotifier

logger = logging.getLogger(__name__)

# Create blueprint
api = Blueprint('api', __name__, url_prefix='/api/v1')

# Service instance (will be initialized in app.py)
notifier: Optional[OneSignalNotifier] = None

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
}

INVALID_BODY_ERROR = 'Request body must be valid JSON'


def init_routes(_notifier: OneSignalNotifier) -> None:
    """Initialize route dependencies"""
    global notifier
    notifier = _notifier


def _json_response(result: AlertResult, status: int) -> Response:
    response = jsonify(result.to_dict())
    response.status_code = status
    response.headers.update(CORS_HEADERS)
    return response


def handle_relay_errors(f):
    """Decorator turning any relay failure into a {success: false} response"""
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except RelayError as e:
            logger.error(f"SOS relay failed ({e.kind}): {e.message}")
            return _json_response(AlertResult.failed(e.message), e.status_code)
        except Exception as e:
            logger.error(f"SOS relay failed: {e}", exc_info=True)
            return _json_response(AlertResult.failed(str(e)), RelayError.status_code)
    return decorated


def _parse_body():
    """Parse the request body as JSON whatever its content type"""
    try:
        return request.get_json(force=True)
    except BadRequest as e:
        raise ValidationError(INVALID_BODY_ERROR) from e


# =============================================================================
# SOS Relay Endpoint
# =============================================================================

@api.route('/send-sos', methods=['OPTIONS', 'POST', 'GET', 'PUT', 'PATCH', 'DELETE'])
@handle_relay_errors
def send_sos():
    """
    Relay an SOS push notification to OneSignal.

    Request body:
    - player_ids: Non-empty list of OneSignal player ids
    - message: (optional) Notification text. Defaults to a generic guardian alert.
    """
    # CORS preflight, answered before touching the body
    if request.method == 'OPTIONS':
        return Response('ok', status=200, headers=CORS_HEADERS, mimetype='text/plain')

    alert = AlertRequest.from_payload(_parse_body())

    if notifier is None:
        raise RuntimeError('Notifier not initialized')

    provider_response = notifier.send(alert)
    return _json_response(AlertResult.sent(provider_response), 200)


# =============================================================================
# Health Endpoint
# =============================================================================

@api.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.utcnow().isoformat(),
        'version': '1.0.0',
        'provider_configured': bool(notifier and notifier.is_configured)
    })
