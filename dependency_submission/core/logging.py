"""Logging setup via structlog with the stdlib bridge.

Configured once from the CLI entry point. Modules log through either
`logging.getLogger(__name__)` or `structlog.get_logger(__name__)`; both end
up on one stdout handler whose `ProcessorFormatter` renders every record the
same way, so a run never mixes plain-text and JSON lines.

Renderer selection:
  debug=True:  `ConsoleRenderer` (set when the job runs with RUNNER_DEBUG=1).
  debug=False: `JSONRenderer`.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(debug: bool = False) -> None:
    """Configure structlog and stdlib logging. Safe to call repeatedly."""
    level = logging.DEBUG if debug else logging.INFO
    shared_processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
