import structlog
import logging
import sys
from typing import Optional
from commit_notifier.core.config import settings

#libraries that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

def setup_logging(debug: Optional[bool] = None)-> None:
    """structured logging for cli runs and the relay"""
    debug = settings.DEBUG if debug is None else debug

    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

def get_logger(name: str = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)

def bind_run_context(repo: str, sha: Optional[str] = None) -> None:
    """attach repo/sha to every log line of the current run"""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(repo=repo, sha=sha[:8] if sha else None)

def clear_run_context() -> None:
    structlog.contextvars.clear_contextvars()

class LoggingMiddleware:
    """logs each relay request and clears run context left by the previous one"""

    def __init__(self, app):
        self.app = app
        self.logger = get_logger("relay")

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            clear_run_context()
            self.logger.info(
                "Request started",
                method=scope["method"],
                path=scope["path"],
                client=(scope.get("client") or ["unknown", 0])[0]
            )

        await self.app(scope, receive, send)
