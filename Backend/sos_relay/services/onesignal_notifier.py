"""
OneSignal Push Notification Service
Relays SOS alerts to the OneSignal REST API.
One attempt per alert; failures are raised as RelayError subclasses.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from errors import ConfigError, TransportError, UpstreamError
from models.sos import AlertRequest

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_API_URL = "https://onesignal.com/api/v1/notifications"
DEFAULT_HEADING = "⚠️ SOS Emergency"
DEFAULT_MESSAGE = "Emergency alert from a guardian"
DEFAULT_PRIORITY = 10
DEFAULT_TIMEOUT = 10.0


# -----------------------------------------------------------------------------
# OneSignal Notifier
# -----------------------------------------------------------------------------

class OneSignalNotifier:
    """
    Sends one push notification per SOS alert through OneSignal.
    Credentials are checked on every send so a misconfigured deployment
    still starts and reports the problem per request.
    """

    def __init__(
        self,
        app_id: Optional[str],
        rest_api_key: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        heading: str = DEFAULT_HEADING,
        default_message: str = DEFAULT_MESSAGE,
        priority: int = DEFAULT_PRIORITY,
    ):
        self.app_id = app_id
        self.rest_api_key = rest_api_key
        self.api_url = api_url
        self.timeout = timeout
        self.heading = heading
        self.default_message = default_message
        self.priority = priority

    @classmethod
    def from_config(cls, config) -> 'OneSignalNotifier':
        """Build a notifier from a Flask config mapping"""
        return cls(
            app_id=config.get('ONESIGNAL_APP_ID'),
            rest_api_key=config.get('ONESIGNAL_REST_API_KEY'),
            api_url=config.get('ONESIGNAL_API_URL', DEFAULT_API_URL),
            timeout=config.get('ONESIGNAL_TIMEOUT', DEFAULT_TIMEOUT),
            heading=config.get('SOS_HEADING', DEFAULT_HEADING),
            default_message=config.get('SOS_DEFAULT_MESSAGE', DEFAULT_MESSAGE),
            priority=config.get('SOS_PRIORITY', DEFAULT_PRIORITY),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.app_id and self.rest_api_key)

    def build_payload(self, player_ids: List[str], message: Optional[str] = None) -> Dict[str, Any]:
        return {
            'app_id': self.app_id,
            'include_player_ids': player_ids,
            'headings': {'en': self.heading},
            'contents': {'en': message or self.default_message},
            'priority': self.priority,
        }

    def send(self, alert: AlertRequest) -> Dict[str, Any]:
        """
        Relay an alert to OneSignal.
        Returns the parsed provider response on success.
        """
        if not self.is_configured:
            raise ConfigError("OneSignal credentials not configured")

        headers = {
            'Content-Type': 'application/json',
            'Authorization': f"Basic {self.rest_api_key}",
        }
        payload = self.build_payload(alert.player_ids, alert.message)

        try:
            response = requests.post(
                self.api_url,
                json=payload,
                headers=headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"OneSignal request failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise TransportError(f"OneSignal returned an invalid JSON response: {e}") from e

        # Anything outside 2xx is a failure, including 1xx and 3xx answers
        if not 200 <= response.status_code < 300:
            body = json.dumps(result, separators=(',', ':'), ensure_ascii=False)
            raise UpstreamError(
                f"OneSignal API error: {body}",
                status=response.status_code,
                body=result
            )

        if result is None:
            raise TransportError("OneSignal returned an empty (null) response")

        logger.info(f"Push sent successfully: {result}")
        return result
