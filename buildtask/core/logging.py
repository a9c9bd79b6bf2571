"""Diagnostic logging via structlog.

Configures structlog once per process. Modules keep using
`logging.getLogger(__name__)`; the stdlib bridge below routes those
records to the same stream.

Renderer selection:
  debug=True  — `ConsoleRenderer` for local runs.
  debug=False — `JSONRenderer` for machine-parseable agent logs.

Diagnostics go to stderr. Stdout belongs to the CI host, which parses
it for ##vso commands.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(debug: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog and the stdlib bridge.

    Calling multiple times is safe; basicConfig only installs a handler
    when the root logger has none.
    """
    if stream is None:
        stream = sys.stderr

    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=stream,
        level=logging.DEBUG if debug else logging.INFO,
    )
