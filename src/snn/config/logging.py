"""structlog configuration for snn.

Logs go to stderr so validation output on stdout stays pipeable.
Human mode uses the console renderer, ``--log-json`` emits JSON lines.

Names reaching the logs are untrusted input: control characters in
string values are escaped before rendering so a crafted name cannot
forge extra log lines.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)}


def escape_control_chars(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Escape C0 control characters and DEL in every string value."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = value.translate(_CONTROL_ESCAPES)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: Set the ``snn`` logger to DEBUG. Otherwise WARNING.
        log_json: Render JSON lines instead of console output.
        stream: Destination, defaults to ``sys.stderr``.
    """
    out = stream or sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                escape_control_chars,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("snn").setLevel(logging.DEBUG if verbose else logging.WARNING)
