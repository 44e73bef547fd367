"""intl structured logging module.

Library loggers are structlog loggers wrapping stdlib loggers under the
`intl` namespace. Importing intl never touches the root logger: the `intl`
logger only carries a NullHandler, so records reach whatever handlers the
host application configured. Call `configure_logging()` to attach a stderr
handler of our own.

Usage:
    from intl.core.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translations_loaded", language="bg")
"""

import inspect
import logging
import sys
from typing import Any, Callable, Dict, Optional, TextIO

import structlog
from structlog.stdlib import BoundLogger

from intl.core.config import settings

LIBRARY_LOGGER = "intl"

Renderer = Callable[[Any, str, Dict[str, Any]], str]

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _make_renderer(is_production: Optional[bool] = None) -> Renderer:
    """JSON for production, plain key=value console output otherwise."""
    prod_mode = is_production if is_production is not None else settings.is_production
    if prod_mode:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


_renderer: Renderer = _make_renderer()


def _render(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> str:
    # Looked up per event so configure_logging() also affects existing loggers
    return _renderer(logger, method_name, event_dict)


PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    _render,
]


def _wrap(name: str, **context: Any) -> BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    ).bind(**context)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> BoundLogger:
    """Send intl log output to a stream handler.

    Only the `intl` logger is touched. Under pytest the library logger is
    silenced instead.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL.
        is_production: Optional override for production mode. Controls JSON
            vs console output. Defaults to settings.is_production.
        stream: Target stream (default: stderr).

    Returns:
        Logger bound to the `intl` namespace.
    """
    global _renderer

    library_logger = logging.getLogger(LIBRARY_LOGGER)

    # Suppress library output during tests
    if _is_test_environment():
        library_logger.setLevel(logging.CRITICAL + 1)
        return _wrap(LIBRARY_LOGGER)

    _renderer = _make_renderer(is_production)

    for handler in list(library_logger.handlers):
        if getattr(handler, "intl_handler", False):
            library_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.intl_handler = True
    library_logger.addHandler(handler)

    effective_log_level = log_level or settings.LOG_LEVEL
    library_logger.setLevel(getattr(logging, effective_log_level.upper(), logging.INFO))

    return _wrap(LIBRARY_LOGGER)


logger: BoundLogger = _wrap(LIBRARY_LOGGER)


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Returns:
        Logger named after the calling module and bound with `component`
        and `module_path`, e.g.
        {"component": "translator", "module_path": "intl.i18n.translator"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    module = inspect.getmodule(frame)

    if module:
        module_name = module.__name__
        parts = module_name.split(".")

        return _wrap(module_name, component=parts[-1], module_path=module_name)

    return logger.bind(component="unknown")
