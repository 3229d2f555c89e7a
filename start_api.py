#!/usr/bin/env python3
"""
Startup script for the Mini Event Finder API server.

Usage:
    python start_api.py              # Development mode
    python start_api.py --prod       # Production mode
    python start_api.py --port 8080  # Custom port
"""

import argparse
import os
from datetime import datetime

import uvicorn

from api.config import Settings


def main():
    """Start the FastAPI server with configurable options."""
    # Set environment variable for efficient file watching
    os.environ.setdefault("WATCHFILES_FORCE_POLLING", "1")
    settings = Settings.from_env()

    parser = argparse.ArgumentParser(description="Start Mini Event Finder API")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})"
    )
    parser.add_argument(
        "--prod",
        action="store_true",
        help="Run in production mode (no auto-reload, optimized)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload to reduce CPU usage"
    )

    args = parser.parse_args()

    if args.workers > 1:
        # Each worker holds its own in-memory store
        print("⚠️  Events created in one worker are not visible to the others")

    if args.prod:
        os.environ.setdefault("APP_ENV", "production")
        print("🚀 Starting Mini Event Finder API in PRODUCTION mode")
        print(f"   📍 http://{args.host}:{args.port}")
        print(f"   👷 {args.workers} worker(s)")

        uvicorn.run(
            "api.main:app",
            host=args.host,
            port=args.port,
            workers=args.workers,
            log_level="info",
            loop="asyncio",
            http="h11"
        )
    else:
        reload_enabled = not args.no_reload
        reload_msg = "🔄 Auto-reload enabled" if reload_enabled else "⚡ Auto-reload DISABLED (lower CPU usage)"

        print("🎉 Starting Mini Event Finder API in DEVELOPMENT mode")
        print(f"   📍 http://{args.host}:{args.port}")
        print(f"   📝 Events: http://{args.host}:{args.port}/api/events")
        print(f"   💚 Health: http://{args.host}:{args.port}/api/health")
        print(f"   {reload_msg}")
        print(f"   📚 API docs: http://{args.host}:{args.port}/docs")
        print(f"   ⏰ Started at {datetime.now():%Y-%m-%d %H:%M:%S}")

        uvicorn_config = {
            "app": "api.main:app",
            "host": args.host,
            "port": args.port,
            "log_level": "debug",
            "loop": "asyncio",
            "http": "h11"
        }

        if reload_enabled:
            uvicorn_config.update({
                "reload": True,
                "reload_dirs": ["api", "events"],
                "reload_delay": 1.0
            })

        uvicorn.run(**uvicorn_config)


if __name__ == "__main__":
    main()
