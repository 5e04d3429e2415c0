import os
import logging
from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from api.routes import api, init_routes
from services.onesignal_notifier import OneSignalNotifier

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: int = logging.INFO, log_file: str = Config.LOG_FILE) -> None:
    """Attach console and file handlers once, then apply the level"""
    root = logging.getLogger()
    if not root.handlers:
        handlers = [logging.StreamHandler()]
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError:
            pass  # Log file optional
        logging.basicConfig(format=LOG_FORMAT, handlers=handlers)
    root.setLevel(level)


configure_logging()
logger = logging.getLogger(__name__)


def create_app(config_class=Config) -> Flask:
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # CORS for everything except the relay endpoint, which sets its own headers
    CORS(app, resources={
        r"/api/*": {
            "origins": app.config.get('CORS_ORIGINS', '*').split(','),
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["authorization", "x-client-info", "apikey", "content-type"]
        }
    })

    # Initialize services
    notifier = OneSignalNotifier.from_config(app.config)
    if not notifier.is_configured:
        logger.warning("OneSignal credentials not configured; SOS requests will fail until they are set")

    # Initialize API routes with services
    init_routes(notifier)

    # Register blueprints
    app.register_blueprint(api)

    # Register root routes
    @app.route('/')
    def index():
        return jsonify({
            'name': 'SOS Relay API',
            'version': '1.0.0',
            'status': 'operational',
            'endpoints': {
                'OPTIONS|POST /api/v1/send-sos': 'Relay an SOS push notification',
                'GET /api/v1/health': 'Health check endpoint'
            }
        })

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    logger.info("SOS Relay application initialized")
    return app


if __name__ == '__main__':
    host = os.environ.get('SOS_HOST', '0.0.0.0')
    port = int(os.environ.get('SOS_PORT', 5000))
    debug = os.environ.get('SOS_DEBUG', 'false').lower() == 'true'

    logger.info(f"Starting SOS Relay server on {host}:{port}")

    create_app().run(
        host=host,
        port=port,
        debug=debug,
        threaded=True
    )
