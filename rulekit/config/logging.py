"""structlog configuration for rulekit.

The library only creates loggers; applications opt in to output by calling
`configure_logging`.
"""

import logging
import sys

import structlog

from rulekit.config.settings import RulekitSettings


def configure_logging(settings: RulekitSettings | None = None) -> None:
    """Route structlog through stdlib logging to stderr.

    Args:
        settings: Explicit settings; read from the environment when None
    """
    if settings is None:
        settings = RulekitSettings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    rulekit_logger = logging.getLogger("rulekit")
    rulekit_logger.handlers.clear()
    rulekit_logger.addHandler(handler)
    rulekit_logger.propagate = False
    rulekit_logger.setLevel(logging.DEBUG if settings.verbose else logging.WARNING)
