"""structlog setup for the annotations_policy logger tree.

Only the ``annotations_policy`` logger is touched: it gets its own stderr
handler and stops propagating, so a host application's root handlers are
left alone. Records render as key-value console lines, or as JSON lines
with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "annotations_policy"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route annotations_policy logs to stderr.

    Args:
        verbose: Emit DEBUG and INFO records (accepted and rejected settings).
            Otherwise only WARNING and above get through.
        log_json: Render JSON lines instead of console lines.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    # Reconfiguring replaces our previous handler rather than stacking another.
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
