"""
Pytest configuration and shared fixtures for SOS relay tests.
"""

import pytest
import json
from typing import Optional

import requests

from config import Config


class TestingConfig(Config):
    TESTING = True
    ONESIGNAL_APP_ID = 'test-app-id'
    ONESIGNAL_REST_API_KEY = 'test-rest-key'
    ONESIGNAL_API_URL = 'https://onesignal.test/api/v1/notifications'
    ONESIGNAL_TIMEOUT = 5.0


class UnconfiguredConfig(TestingConfig):
    ONESIGNAL_APP_ID = None
    ONESIGNAL_REST_API_KEY = None


@pytest.fixture
def testing_config():
    return TestingConfig


@pytest.fixture
def app():
    """Create application with provider credentials"""
    from app import create_app
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def unconfigured_client():
    """Test client for an app started without provider credentials"""
    from app import create_app
    return create_app(UnconfiguredConfig).test_client()


@pytest.fixture
def notifier():
    from services.onesignal_notifier import OneSignalNotifier
    return OneSignalNotifier(
        app_id='test-app-id',
        rest_api_key='test-rest-key',
        api_url='https://onesignal.test/api/v1/notifications',
        timeout=5.0
    )


def make_provider_response(body, status_code: int = 200, raw: Optional[bytes] = None):
    """
    Build a real requests.Response carrying a JSON body.
    Pass raw to supply undecodable content instead.
    """
    response = requests.Response()
    response.status_code = status_code
    response.headers['Content-Type'] = 'application/json'
    response.encoding = 'utf-8'
    response._content = raw if raw is not None else json.dumps(body).encode('utf-8')
    return response


@pytest.fixture
def provider_response():
    """Fixture that returns the provider response factory"""
    return make_provider_response
