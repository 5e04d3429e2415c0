import os


class Config:
    # OneSignal credentials (checked per request, never at startup)
    ONESIGNAL_APP_ID = os.environ.get('ONESIGNAL_APP_ID')
    ONESIGNAL_REST_API_KEY = os.environ.get('ONESIGNAL_REST_API_KEY')

    # Provider endpoint
    ONESIGNAL_API_URL = os.environ.get(
        'ONESIGNAL_API_URL', 'https://onesignal.com/api/v1/notifications'
    )
    ONESIGNAL_TIMEOUT = float(os.environ.get('ONESIGNAL_TIMEOUT', 10))  # seconds

    # Notification content
    SOS_HEADING = '⚠️ SOS Emergency'
    SOS_DEFAULT_MESSAGE = 'Emergency alert from a guardian'
    SOS_PRIORITY = 10

    # CORS origins for routes other than the relay endpoint
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    LOG_FILE = os.environ.get('SOS_LOG_FILE', 'sos_relay.log')
