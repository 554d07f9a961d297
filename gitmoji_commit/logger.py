"""Structured logging for gitmoji_commit using structlog.

Log output always goes to stderr: when serving MCP over stdio, stdout is
the protocol channel.
"""

import logging
import sys

import structlog
from structlog.types import FilteringBoundLogger


# structlog pipeline; wrap_for_formatter hands off to the ProcessorFormatter
# installed by configure_logging()
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that always writes to the current sys.stderr."""

    def __init__(self):
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_logging(level: str = "WARNING", log_format: str = "pretty") -> None:
    """Route stdlib and structlog output to stderr.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        log_format: "pretty" for console output or "json".
    """
    processors = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if log_format == "json":
        processors.extend(
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    handler = _StderrHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=processors,
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )

    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # The MCP SDK logs every request at INFO
    logging.getLogger("mcp").setLevel(max(logging.root.level, logging.WARNING))


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger bound to a stdlib logger name."""
    return structlog.get_logger(name)
