from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO
import structlog

def configure_logging(debug: bool = True, json: bool = True, stream: Optional[TextIO] = None) -> None:
    """
    Route structlog (and stdlib logging) to one stream.
    JSON lines by default; json=False gives the human-readable console renderer.
    """
    level = logging.DEBUG if debug else logging.INFO
    out = stream or sys.stdout
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        # ConsoleRenderer formats exceptions itself
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(format="%(message)s", stream=out, level=level, force=True)
