"""Command line entry point.

Usage:
    commit-notifier            send one notification for the event at GITHUB_EVENT_PATH
    commit-notifier serve      run the push-webhook relay
"""
from commit_notifier.core.config import load_settings, settings
from commit_notifier.core.exceptions import ConfigurationError, NotifierError
from commit_notifier.core.logging import setup_logging, get_logger
from commit_notifier.services.event_loader import load_event
from commit_notifier.services.notifier import run_notification
from typing import List, Optional
import argparse
import asyncio

logger = get_logger(__name__)

def notify() -> int:
    try:
        event = load_event(
            settings.GITHUB_EVENT_PATH,
            repository=settings.GITHUB_REPOSITORY,
            ref=settings.GITHUB_REF,
            server_url=settings.GITHUB_SERVER_URL,
        )
        asyncio.run(run_notification(settings.notify_options(), event))
    except NotifierError as e:
        logger.error("notification failed", error=str(e), error_type=type(e).__name__)
        return 1

    logger.info("action completed successfully")
    return 0

def serve() -> int:
    import uvicorn
    from commit_notifier.app import create_app

    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT, log_config=None)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="commit-notifier",
        description="Post a chat embed for a pushed commit to a webhook.",
    )
    parser.add_argument("command", nargs="?", choices=["notify", "serve"], default="notify",
                        help="notify once for the current event (default) or run the relay")
    args = parser.parse_args(argv)

    setup_logging()
    try:
        load_settings()
    except ConfigurationError as e:
        logger.error("invalid configuration", error=str(e), error_type=type(e).__name__)
        return 1

    if args.command == "serve":
        return serve()
    return notify()

if __name__ == "__main__":
    raise SystemExit(main())
