#!/usr/bin/env python3
"""
Entry point script for running the SOS relay.
"""

import os
import argparse
import logging

from dotenv import load_dotenv

# Load .env before the config module reads the environment
load_dotenv()


def main():
    parser = argparse.ArgumentParser(description='SOS push notification relay')

    parser.add_argument(
        '--host',
        default=os.environ.get('SOS_HOST', '0.0.0.0'),
        help='Host to bind to (default: 0.0.0.0)'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=int(os.environ.get('SOS_PORT', 5000)),
        help='Port to bind to (default: 5000)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=os.environ.get('SOS_DEBUG', 'false').lower() == 'true',
        help='Enable debug mode'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='INFO',
        help='Logging level (default: INFO)'
    )

    args = parser.parse_args()

    # Import and create app; importing app installs the log handlers
    from app import create_app, configure_logging
    configure_logging(getattr(logging, args.log_level))
    logger = logging.getLogger(__name__)

    app = create_app()

    logger.info("Starting SOS Relay")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")
    logger.info(f"  Debug: {args.debug}")

    app.run(
        host=args.host,
        port=args.port,
        debug=args.debug,
        threaded=True
    )


if __name__ == '__main__':
    main()
