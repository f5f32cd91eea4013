#!/usr/bin/env python3
"""
Entry point for the Fencing Tournament API.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development, production or testing (default: development)
    PORT: Port to run on (default: 5000)
    DATABASE_URL: SQLAlchemy database URL (default: sqlite:///fencing.db)
    JWT_SECRET_KEY: base64 encoded token signing secret
"""
import logging
import os

from fencing.app import create_app

logger = logging.getLogger('fencing')


def run_api():
    """Run the API server."""
    app = create_app()
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'
    
    logger.info("Starting Fencing API on port %d...", port)
    app.run(host='0.0.0.0', port=port, debug=debug)


if __name__ == '__main__':
    run_api()
