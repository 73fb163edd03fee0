#!/usr/bin/env python3
"""Main entry point for the Debate Hall backend."""

import logging
import os
import sys

from config.settings import get_default_config


def setup_logging(level: str = "INFO"):
    """Configure logging for the web server."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def print_usage():
    """Print usage information for local development."""

    print("Debate Hall")
    print("=" * 40)
    print("Usage:")
    print("   python main.py --web   start the API server")
    print("   python main.py --help  show this message")
    print()
    print("Configuration: debate_hall.json (or DEBATE_HALL_CONFIG), overridden by")
    print("DATABASE_PATH, JWT_SECRET_KEY, JWT_EXPIRE_HOURS, ALLOWED_ORIGINS, PORT, LOG_LEVEL")


def start_web_server():
    """Start the FastAPI web server."""
    config = get_default_config()
    setup_logging(config.system.log_level)

    import uvicorn

    from web.api import app

    host = config.server.host
    port = config.server.port

    print("Starting Debate Hall API server...")
    print(f"API Documentation: http://localhost:{port}/docs")

    uvicorn.run(
        app, host=host, port=port, log_level=config.system.log_level.lower(), access_log=True
    )


def main():
    """Main entry point."""
    # Check for production environment (Railway, Docker, Heroku, etc.)
    is_production = any([
        "RAILWAY_ENVIRONMENT" in os.environ,
        "PORT" in os.environ,
        "DYNO" in os.environ,  # Heroku
        os.environ.get("ENVIRONMENT") == "production"
    ])

    if "--help" in sys.argv or "-h" in sys.argv:
        print_usage()
    elif is_production or "--web" in sys.argv:
        start_web_server()
    else:
        print_usage()
        print()
        print("Tip: Use 'python main.py --web' to start the server")


if __name__ == "__main__":
    main()
